from models.db import db

class Slot(db.Model):
    __tablename__ = "slots"

    # slot_<turf_id>_<YYYY-MM-DD>_<window index>
    id = db.Column(db.String(128), primary_key=True)

    turf_id = db.Column(db.String(64), nullable=False, index=True)
    date = db.Column(db.String(10), nullable=False, index=True)  # "2026-01-20"
    window_index = db.Column(db.Integer, nullable=False)
    time = db.Column(db.String(40), nullable=False)  # "6:00 AM - 7:00 AM"

    price = db.Column(db.Float, nullable=False)  # turf price at generation time
    available = db.Column(db.Boolean, default=True, nullable=False)

    __table_args__ = (
        db.UniqueConstraint("turf_id", "date", "window_index", name="uq_turf_date_window"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "turfId": self.turf_id,
            "date": self.date,
            "time": self.time,
            "available": self.available,
            "price": self.price,
        }
