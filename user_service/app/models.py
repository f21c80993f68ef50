from sqlalchemy import Column, Integer, String

from shared_common.db import ToDictMixIn
from .db import Base


class User(Base, ToDictMixIn):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    # no unique constraint: duplicate usernames and emails are accepted
    username = Column(String(50), index=True, nullable=False)
    email = Column(String, index=True, nullable=False) # ald validated by pydantic
    password_hash = Column(String, nullable=False)
