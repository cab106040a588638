"""
Favorites component - per-user favorite notices.
"""

from .component import favorite_notices, run_get_favorites, run_toggle_favorite
from .models import FavoritesOutput, ToggleFavoriteInput

__all__ = [
    "favorite_notices",
    "run_get_favorites",
    "run_toggle_favorite",
    "FavoritesOutput",
    "ToggleFavoriteInput",
]
