from .base import Repository
from .users import UserRepository
from .sessions import SessionRepository
from .turfs import TurfRepository
from .slots import SlotRepository
from .bookings import BookingRepository
from .payments import PaymentRepository
