import logging
from decimal import Decimal

from shared_common.exceptions import InvalidReferenceError, NotFoundError, ValidationError

from .models import PRICE_PRECISION, PRICE_SCALE, Order
from .repository import OrderRepository
from .schemas import OrderRequest, OrderResponse
from .user_client import UserDirectory

logger= logging.getLogger(__name__)

PRICE_INTEGER_DIGITS = PRICE_PRECISION - PRICE_SCALE
PRICE_STEP = Decimal(1).scaleb(-PRICE_SCALE)


def validate_order_request(order_request: OrderRequest | None):
    """Reject a malformed order request, reporting the first broken rule.

    Rules are checked in a fixed order (request, user id, product, quantity,
    price) and nothing is read or written. A price must fit the
    stored column exactly; sub-cent amounts are rejected, never rounded.

    :raises ValidationError: if any rule is broken
    """
    if order_request is None:
        raise ValidationError("Order request is required")
    if order_request.user_id is None:
        raise ValidationError("User ID is required")
    if order_request.product is None or not order_request.product.strip():
        raise ValidationError("Product is required")
    if order_request.quantity is None or order_request.quantity < 1:
        raise ValidationError("Quantity must be at least 1")
    if order_request.price is None:
        raise ValidationError("Price is required")
    if order_request.price <= 0:
        raise ValidationError("Price must be positive")
    if order_request.price.adjusted() >= PRICE_INTEGER_DIGITS:
        raise ValidationError(f"Price must have at most {PRICE_INTEGER_DIGITS} integer digits")
    if order_request.price != order_request.price.quantize(PRICE_STEP):
        raise ValidationError(f"Price must have at most {PRICE_SCALE} decimal places")


def to_order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        user_id=order.user_id,
        product=order.product,
        quantity=order.quantity,
        price=order.price,
    )


class OrderService:
    """Order use cases. Users are owned by the user service and checked remotely."""

    def __init__(self, repository: OrderRepository, users: UserDirectory):
        self.repository = repository
        self.users = users

    async def _require_user(self, user_id: int):
        if not await self.users.exists(user_id):
            raise InvalidReferenceError(f"User not found with ID: {user_id}")

    def _get_or_raise(self, order_id: int) -> Order:
        order = self.repository.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order not found with ID: {order_id}")
        return order

    async def create(self, order_request: OrderRequest) -> OrderResponse:
        logger.info("Creating new order")
        validate_order_request(order_request)
        await self._require_user(order_request.user_id)
        order = Order(
            user_id=order_request.user_id,
            product=order_request.product,
            quantity=order_request.quantity,
            price=order_request.price,
        )
        order = self.repository.save(order)
        logger.info(f"Created new order: {order.to_dict()}")
        return to_order_response(order)

    def get(self, order_id: int) -> OrderResponse:
        logger.info(f"Retrieving order with ID: {order_id}")
        return to_order_response(self._get_or_raise(order_id))

    def list_all(self) -> list[OrderResponse]:
        orders = self.repository.find_all()
        logger.info(f"Retrieved {len(orders)} orders")
        return [to_order_response(order) for order in orders]

    async def list_by_user(self, user_id: int) -> list[OrderResponse]:
        logger.info(f"Retrieving orders for user ID: {user_id}")
        await self._require_user(user_id)
        orders = self.repository.find_by_user_id(user_id)
        logger.info(f"Retrieved {len(orders)} orders for user ID: {user_id}")
        return [to_order_response(order) for order in orders]

    async def update(self, order_id: int, order_request: OrderRequest) -> OrderResponse:
        logger.info(f"Updating order with ID: {order_id}")
        validate_order_request(order_request)
        order = self._get_or_raise(order_id)
        # only a changed owner needs another round trip to the user service
        if order.user_id != order_request.user_id:
            await self._require_user(order_request.user_id)
        order.user_id = order_request.user_id
        order.product = order_request.product
        order.quantity = order_request.quantity
        order.price = order_request.price
        order = self.repository.save(order)
        logger.info(f"Updated order: {order.to_dict()}")
        return to_order_response(order)

    def delete(self, order_id: int):
        logger.info(f"Deleting order with ID: {order_id}")
        order = self._get_or_raise(order_id)
        self.repository.delete(order)
        logger.info(f"Deleted order with ID: {order_id}")
