"""
Bootstrap component - seed demo accounts and the welcome notice.
"""

from .component import run
from .models import BootstrapInput, BootstrapOutput

__all__ = ["run", "BootstrapInput", "BootstrapOutput"]
