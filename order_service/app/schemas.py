from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OrderRequest(BaseModel):
    """Schema for the order create and update requests.

    Fields are optional at parse time: the service layer checks them in a
    fixed order so each invalid payload gets one deterministic message.
    ``price`` may be sent as a JSON number or a string; both are read exactly.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: int | None = Field(default=None, examples=[1])
    product: str | None = Field(default=None, examples=["Laptop"])
    quantity: int | None = Field(default=None, examples=[1])
    price: Decimal | None = Field(default=None, examples=["999.99"])


class OrderResponse(BaseModel):
    """Schema for returning order details in responses.

    ``price`` is written as a decimal string so no digits are lost.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    user_id: int
    product: str
    quantity: int
    price: Decimal
