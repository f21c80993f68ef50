from shared_common.repository import SqlAlchemyRepository

from .models import Order


class OrderRepository(SqlAlchemyRepository[Order]):
    model = Order

    def find_by_user_id(self, user_id: int) -> list[Order]:
        return self.find_by_field("user_id", user_id)
