from shared_common.repository import SqlAlchemyRepository

from .models import User


class UserRepository(SqlAlchemyRepository[User]):
    model = User
