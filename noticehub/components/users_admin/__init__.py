"""
Users admin component - list and delete accounts.
"""

from .component import run_delete_user, run_list_users
from .models import DeleteUserInput, UserAdminOutput, UserListOutput

__all__ = [
    "run_delete_user",
    "run_list_users",
    "DeleteUserInput",
    "UserAdminOutput",
    "UserListOutput",
]
