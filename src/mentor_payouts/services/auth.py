"""Sign-in check for the admin and mentor dashboards."""

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    """Dashboard a signed-in user is routed to."""

    ADMIN = "admin"
    MENTOR = "mentor"


@dataclass
class SignInService:
    """Match credentials against the configured demo accounts.

    The admin account is a single configured email. Any email containing
    ``mentor`` signs in as a mentor. Both share one password.
    """

    admin_email: str
    password: str

    def authenticate(self, email: str, password: str) -> UserRole | None:
        """Return the role for valid credentials, or ``None``."""
        if password != self.password:
            return None
        if email == self.admin_email:
            return UserRole.ADMIN
        if "mentor" in email:
            return UserRole.MENTOR
        return None
