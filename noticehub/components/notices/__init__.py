"""
Notices component - add, delete, publish and list notices.
"""

from .component import (
    run_add_notice,
    run_delete_notice,
    run_list_notices,
    run_toggle_publish,
    visible_notices,
)
from .models import (
    AddNoticeInput,
    DeleteNoticeInput,
    NoticeListOutput,
    NoticeOutput,
    TogglePublishInput,
)

__all__ = [
    # Entry points
    "run_add_notice",
    "run_delete_notice",
    "run_list_notices",
    "run_toggle_publish",
    "visible_notices",
    # Models
    "AddNoticeInput",
    "DeleteNoticeInput",
    "NoticeListOutput",
    "NoticeOutput",
    "TogglePublishInput",
]
