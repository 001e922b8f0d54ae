from models.session import Session
from repositories.base import Repository


class SessionRepository(Repository):
    model = Session

    def get_by_token_hash(self, token_hash: str):
        return self.session.query(Session).filter_by(token_hash=token_hash).first()
