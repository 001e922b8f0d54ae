from datetime import datetime
from models.db import db

class Turf(db.Model):
    __tablename__ = "turfs"

    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    location = db.Column(db.String(160), nullable=False)

    price = db.Column(db.Float, nullable=False)  # per hour
    rating = db.Column(db.Float, nullable=False, default=4.5)
    amenities = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location,
            "price": self.price,
            "rating": self.rating,
            "amenities": list(self.amenities or []),
        }
