from sqlalchemy.orm import joinedload
from app.data.ordering.order import Order
from app.data.repositories.base_repository import BaseRepository


class OrderRepository(BaseRepository):
    model = Order

    def with_relations(self):
        return self.query().options(joinedload(Order.user), joinedload(Order.product))

    def get_with_relations(self, order_id):
        return self.with_relations().filter(Order.id == order_id).first()

    def paginate_with_relations(self, page, page_size):
        return self.paginate(page, page_size, query=self.with_relations())

    def list_by_uid(self, uid):
        return (
            self.query()
            .options(joinedload(Order.product))
            .filter(Order.uid == uid)
            .order_by(Order.id)
            .all()
        )
