"""
Accounts component - registration, login and logout.
"""

from .component import (
    email_taken,
    run_current_session,
    run_login,
    run_logout,
    run_register,
    run_require_session,
)
from .models import AccountOutput, LoginInput, RegisterInput

__all__ = [
    # Entry points
    "run_current_session",
    "run_login",
    "run_logout",
    "run_register",
    "run_require_session",
    "email_taken",
    # Models
    "AccountOutput",
    "LoginInput",
    "RegisterInput",
]
