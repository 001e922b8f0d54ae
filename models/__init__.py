from .db import db
from .user import User
from .audit_log import AuditLog
from .session import Session
from .turf import Turf
from .slot import Slot
from .booking import Booking
from .payment import Payment
