from models.user import ROLE_USER
from services.catalog import require_admin


class AdminAggregator:
    """Read-only rollups plus catalog administration for admins."""

    def __init__(self, users, catalog, booking_ledger):
        self.users = users
        self.catalog = catalog
        self.booking_ledger = booking_ledger

    def stats(self, user) -> dict:
        require_admin(user, "Only admins can view stats")
        # revenue trusts each booking's own payment status
        return {
            "totalBookings": self.booking_ledger.count(),
            "totalRevenue": self.booking_ledger.revenue(),
            "totalTurfs": self.catalog.count(),
            "totalUsers": self.users.count_by_role(ROLE_USER),
        }

    def list_turfs(self, user):
        require_admin(user, "Only admins can view turfs")
        return self.catalog.list()

    def list_bookings(self, user):
        return self.booking_ledger.list_all(user)
