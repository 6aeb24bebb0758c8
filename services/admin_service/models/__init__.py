"""Admin Service models package.

Re-exports all models and enums so that SQLAlchemy's mapper registry sees
every table on import. When adding a model, add both its import and its
__all__ entry.
"""

from services.admin_service.models.admin import AdminUser  # noqa: F401
from services.admin_service.models.creator import Profile, User  # noqa: F401
from services.admin_service.models.enums import (  # noqa: F401
    PaymentStatus,
    UserType,
)
from services.admin_service.models.payment import (  # noqa: F401
    Supporter,
    Withdrawal,
    status_is,
)
from services.admin_service.models.wishlist import (  # noqa: F401
    WishlistImage,
    WishlistItem,
)

__all__ = [
    # Enums
    "PaymentStatus",
    "UserType",
    # Accounts
    "AdminUser",
    "User",
    "Profile",
    # Money
    "Supporter",
    "Withdrawal",
    "status_is",
    # Wishlist
    "WishlistItem",
    "WishlistImage",
]
