"""Anonymous identity and the admin gate."""

from .decorators import admin_required, identity_required
from .services import AdminGate, IdentityService

__all__ = ["AdminGate", "IdentityService", "admin_required", "identity_required"]
