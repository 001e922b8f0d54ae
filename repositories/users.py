from models.user import User
from repositories.base import Repository


class UserRepository(Repository):
    model = User

    def get_by_email(self, email: str):
        return self.session.query(User).filter_by(email=email).first()

    def count_by_role(self, role: str) -> int:
        return self.session.query(User).filter_by(role=role).count()
