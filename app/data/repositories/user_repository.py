from app.data.core.user import User
from app.data.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository):
    model = User

    def get_by_uid(self, uid):
        if not uid:
            return None
        return self.find_one_by(uid=uid)

    def get_by_email(self, email):
        if not email:
            return None
        return self.find_one_by(email=email)
