"""Value objects attached to users."""

from identity_store.domain.user.value_objects.claim import Claim
from identity_store.domain.user.value_objects.user_login_info import UserLoginInfo

__all__ = [
    "Claim",
    "UserLoginInfo",
]
