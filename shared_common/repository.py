import logging
from typing import Generic, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .exceptions import InternalError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class SqlAlchemyRepository(Generic[ModelT]):
    """Narrow persistence operations for one mapped entity.

    Subclasses set ``model`` and add their own finders. Writes commit
    immediately; a failing write is rolled back and reported as
    ``InternalError`` so no driver detail reaches the client.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, entity_id: int) -> ModelT | None:
        return self.session.get(self.model, entity_id)

    def find_all(self) -> list[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        return list(self.session.scalars(stmt))

    def find_by_field(self, field: str, value) -> list[ModelT]:
        column = getattr(self.model, field)
        stmt = select(self.model).where(column == value).order_by(self.model.id)
        return list(self.session.scalars(stmt))

    def exists(self, entity_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == entity_id)
        return self.session.scalar(stmt) is not None

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.model))

    def save(self, entity: ModelT) -> ModelT:
        try:
            self.session.add(entity)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(e)
            raise InternalError("Database operation failed") from e
        self.session.refresh(entity)
        return entity

    def delete(self, entity: ModelT):
        try:
            self.session.delete(entity)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(e)
            raise InternalError("Database operation failed") from e
