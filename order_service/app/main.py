from contextlib import asynccontextmanager
import logging
import os

from fastapi import Depends, FastAPI, Request, Response
from sqlalchemy.orm import Session

from shared_common.errors import ErrorResponse, register_exception_handlers
from shared_common.logging_config import configure_logging

from .db import get_db, init_db
from .repository import OrderRepository
from .routing import DecimalJSONRoute
from .schemas import OrderRequest, OrderResponse
from .service import OrderService
from .user_client import DEFAULT_TIMEOUT_MS, UserDirectory, UserServiceClient

SERVICE_NAME= "order_service"
USER_SERVICE_BASE_URL= os.getenv("USER_SERVICE_BASE_URL", "http://localhost:8081")
USER_SERVICE_TIMEOUT_MS= int(os.getenv("USER_SERVICE_TIMEOUT_MS", DEFAULT_TIMEOUT_MS))

configure_logging(SERVICE_NAME)
logger= logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    app.state.user_client= UserServiceClient(USER_SERVICE_BASE_URL, USER_SERVICE_TIMEOUT_MS)
    logger.info(f"Order service started, user service at {USER_SERVICE_BASE_URL}")
    yield
    await app.state.user_client.aclose()

app= FastAPI(lifespan=lifespan, title="Order Service")
# order bodies carry prices that must not pass through float
app.router.route_class= DecimalJSONRoute
register_exception_handlers(app)

ERROR_RESPONSES= {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_user_directory(request: Request) -> UserDirectory:
    return request.app.state.user_client

def get_order_service(db: Session = Depends(get_db), users: UserDirectory = Depends(get_user_directory)) -> OrderService:
    return OrderService(OrderRepository(db), users)


@app.post("/orders", response_model= OrderResponse, status_code=201, responses=ERROR_RESPONSES)
async def create_order(order: OrderRequest, service: OrderService = Depends(get_order_service)):
    """Create a new order after verifying the user exists.

    :param order: OrderRequest object containing order details
    :type order: OrderRequest
    :raises InvalidReferenceError: 400 if the user service does not know the user
    :raises RemoteValidationError: 400 if the user service could not be asked
    :return: the newly created order
    :rtype: OrderResponse
    """
    logger.info(f"POST /orders - Creating order for user {order.user_id}")
    return await service.create(order)

@app.get("/orders", response_model= list[OrderResponse])
def list_orders(service: OrderService = Depends(get_order_service)):
    logger.info("GET /orders - Retrieving all orders")
    return service.list_all()

@app.get("/orders/user/{user_id}", response_model= list[OrderResponse], responses=ERROR_RESPONSES)
async def list_orders_by_user(user_id: int, service: OrderService = Depends(get_order_service)):
    logger.info(f"GET /orders/user/{user_id} - Retrieving orders for user")
    return await service.list_by_user(user_id)

@app.get("/orders/{order_id}", response_model= OrderResponse, responses=ERROR_RESPONSES)
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    logger.info(f"GET /orders/{order_id} - Retrieving order")
    return service.get(order_id)

@app.put("/orders/{order_id}", response_model= OrderResponse, responses=ERROR_RESPONSES)
async def update_order(order_id: int, order: OrderRequest, service: OrderService = Depends(get_order_service)):
    logger.info(f"PUT /orders/{order_id} - Updating order")
    return await service.update(order_id, order)

@app.delete("/orders/{order_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    logger.info(f"DELETE /orders/{order_id} - Deleting order")
    service.delete(order_id)
    return Response(status_code=204)

@app.get("/health")
def health():
    return {"status": "ok", "service": SERVICE_NAME}
