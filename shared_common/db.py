from decimal import Decimal

from sqlalchemy import Numeric, String, create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(url: str):
    """Build an engine for ``url``.

    SQLite connections are shared with FastAPI's worker threads, and an
    in-memory database must live on a single connection or every session
    would see an empty schema.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in IN_MEMORY_SQLITE_URLS:
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


class ToDictMixIn:
    def to_dict(self, exclude=()):
        return {
            c.name: getattr(self, c.name)
            for c in self.__table__.columns
            if c.name not in exclude
        }


class ExactNumeric(TypeDecorator):
    """Fixed-point ``Numeric`` that round-trips ``Decimal`` exactly.

    SQLite has no decimal storage and would go through float, so there the
    value is kept as text, quantized to the column's scale.
    """
    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(64))
        return super().load_dialect_impl(dialect)

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return str(Decimal(value).quantize(Decimal(1).scaleb(-self.impl.scale)))

    def process_result_value(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return Decimal(value)
