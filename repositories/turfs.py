from models.turf import Turf
from repositories.base import Repository


class TurfRepository(Repository):
    model = Turf

    def list(self):
        return self.session.query(Turf).order_by(Turf.created_at.asc(), Turf.id.asc()).all()
