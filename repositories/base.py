from models.db import db


class Repository:
    """
    Thin persistence wrapper around one model.

    The SQLAlchemy session is injected; when none is given the request-scoped
    ``db.session`` is used, so services never touch the ORM directly.
    """

    model = None

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def get(self, obj_id):
        if obj_id is None:
            return None
        return self.session.get(self.model, obj_id)

    def add(self, obj):
        self.session.add(obj)
        return obj

    def delete(self, obj):
        self.session.delete(obj)

    def count(self) -> int:
        return self.session.query(self.model).count()

    def flush(self):
        self.session.flush()

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
