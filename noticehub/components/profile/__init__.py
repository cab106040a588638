"""
Profile component - update profile, change password, delete own account.
"""

from .component import run_change_password, run_delete_own_account, run_update_profile
from .models import ChangePasswordInput, DeleteAccountInput, ProfileOutput, UpdateProfileInput

__all__ = [
    "run_change_password",
    "run_delete_own_account",
    "run_update_profile",
    "ChangePasswordInput",
    "DeleteAccountInput",
    "ProfileOutput",
    "UpdateProfileInput",
]
