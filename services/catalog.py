from errors import BadRequest, Forbidden, NotFound
from models.turf import Turf
from utils.ids import new_id

DEFAULT_RATING = 4.5

SEED_TURFS = [
    {
        "id": "turf1",
        "name": "Green Valley Turf",
        "location": "Downtown, City Center",
        "price": 500,
        "rating": 4.5,
        "amenities": ["Lights", "Parking", "Changing Room"],
    },
    {
        "id": "turf2",
        "name": "Premier Sports Ground",
        "location": "Suburbs, North Area",
        "price": 600,
        "rating": 4.8,
        "amenities": ["Lights", "Parking", "Changing Room", "Canteen"],
    },
    {
        "id": "turf3",
        "name": "Urban Turf Arena",
        "location": "Business District",
        "price": 700,
        "rating": 4.2,
        "amenities": ["Lights", "Parking", "Changing Room", "Gym Access"],
    },
    {
        "id": "turf4",
        "name": "Community Sports Park",
        "location": "Residential Area",
        "price": 400,
        "rating": 4.0,
        "amenities": ["Parking", "Changing Room"],
    },
    {
        "id": "turf5",
        "name": "Elite Sports Complex",
        "location": "Premium Zone",
        "price": 800,
        "rating": 4.9,
        "amenities": ["Lights", "Parking", "Changing Room", "Canteen", "Gym Access"],
    },
]


def require_admin(user, message="Admin access required"):
    if user is None or not user.is_admin:
        raise Forbidden(message)


def _parse_price(value):
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise BadRequest("price must be a number")
    if price <= 0:
        raise BadRequest("price must be positive")
    return price


def _parse_amenities(value):
    if value is None:
        return []
    if not isinstance(value, list):
        raise BadRequest("amenities must be a list")
    return [str(a).strip() for a in value if str(a).strip()]


class TurfCatalog:
    """
    Ground listings. Mutations are admin-only and go through this class for
    both the public and the admin route families.
    """

    def __init__(self, turfs, slot_registry):
        self.turfs = turfs
        self.slot_registry = slot_registry

    def list(self):
        return self.turfs.list()

    def get(self, turf_id: str) -> Turf:
        turf = self.turfs.get(turf_id)
        if not turf:
            raise NotFound("Turf not found")
        return turf

    def count(self) -> int:
        return self.turfs.count()

    def create(self, user, name, location, price, amenities=None) -> Turf:
        require_admin(user, "Only admins can create turfs")
        name = (name or "").strip() if isinstance(name, str) else name
        location = (location or "").strip() if isinstance(location, str) else location
        if not name or not location or not price:
            raise BadRequest("Missing required fields")

        turf = Turf(
            id=new_id("turf"),
            name=name,
            location=location,
            price=_parse_price(price),
            rating=DEFAULT_RATING,
            amenities=_parse_amenities(amenities),
        )
        self.turfs.add(turf)
        self.turfs.flush()
        self.slot_registry.generate(turf, commit=False)
        self.turfs.commit()
        return turf

    def update(self, user, turf_id, name=None, location=None, price=None, amenities=None) -> Turf:
        require_admin(user, "Only admins can update turfs")
        turf = self.get(turf_id)

        # falsy values keep the current field
        if name:
            turf.name = str(name).strip()
        if location:
            turf.location = str(location).strip()
        if price:
            turf.price = _parse_price(price)
        if amenities is not None:
            turf.amenities = _parse_amenities(amenities)

        self.turfs.commit()
        return turf

    def delete(self, user, turf_id) -> None:
        require_admin(user, "Only admins can delete turfs")
        turf = self.get(turf_id)
        # claimed slots stay so existing bookings keep resolving
        self.slot_registry.drop_open_slots(turf.id, commit=False)
        self.turfs.delete(turf)
        self.turfs.commit()

    def seed(self) -> int:
        """Installs the demo turfs when the catalog is empty."""
        if self.turfs.count():
            return 0
        for row in SEED_TURFS:
            self.turfs.add(Turf(**row))
        self.turfs.commit()
        return len(SEED_TURFS)
