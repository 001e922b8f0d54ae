from flask import current_app

from repositories import (
    BookingRepository,
    PaymentRepository,
    SessionRepository,
    SlotRepository,
    TurfRepository,
    UserRepository,
)
from services.admin import AdminAggregator
from services.bookings import BookingLedger
from services.catalog import TurfCatalog
from services.credentials import CredentialStore
from services.payments import PaymentTracker
from services.slot_registry import SlotRegistry

EXTENSION_KEY = "greenfield"


class Services:
    """Wires each component to its repositories."""

    def __init__(self, config, session=None):
        users = UserRepository(session)
        turfs = TurfRepository(session)

        self.credentials = CredentialStore(users, SessionRepository(session), config)
        self.slots = SlotRegistry(SlotRepository(session), config)
        self.catalog = TurfCatalog(turfs, self.slots)
        self.bookings = BookingLedger(BookingRepository(session), self.slots, turfs, config)
        self.payments = PaymentTracker(PaymentRepository(session), self.bookings, config)
        self.admin = AdminAggregator(users, self.catalog, self.bookings)

    def setup(self) -> None:
        """Seeds the admin account and catalog, then fills the slot horizon."""
        self.credentials.ensure_admin()
        seeded = self.catalog.seed()
        created = self.slots.generate_all(self.catalog.list())
        current_app.logger.info("Store ready: %s turf(s) seeded, %s slot(s) generated", seeded, created)


def init_services(app, session=None) -> Services:
    services = Services(app.config, session)
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
