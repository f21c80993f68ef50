from sqlalchemy import Column, Integer, String

from shared_common.db import ExactNumeric, ToDictMixIn
from .db import Base

PRICE_PRECISION = 19
PRICE_SCALE = 2


class Order(Base, ToDictMixIn):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, index=True)
    # refers to a user owned by the user service, checked over HTTP rather than by a foreign key
    user_id = Column(Integer, nullable=False, index=True)
    product = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(ExactNumeric(PRICE_PRECISION, PRICE_SCALE), nullable=False)
