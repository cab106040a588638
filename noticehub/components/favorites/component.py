"""
Favorites component - per-user bookmarked notice ids.

Toggling an id twice restores the original list. Ids are not checked
against the notices collection.
"""

from __future__ import annotations

from collections.abc import Iterable

from noticehub.domain.entities import Notice
from noticehub.ports.repo import FavoritesRepoPort

from .models import FavoritesOutput, ToggleFavoriteInput


def run_get_favorites(user_id: str, favorites_repo: FavoritesRepoPort) -> FavoritesOutput:
    return FavoritesOutput(user_id=user_id, notice_ids=tuple(favorites_repo.get(user_id)))


def run_toggle_favorite(
    inp: ToggleFavoriteInput, favorites_repo: FavoritesRepoPort
) -> FavoritesOutput:
    current = favorites_repo.get(inp.user_id)
    if inp.notice_id in current:
        updated = [x for x in current if x != inp.notice_id]
    else:
        updated = [*current, inp.notice_id]

    favorites_repo.replace(inp.user_id, updated)
    return FavoritesOutput(
        user_id=inp.user_id,
        notice_ids=tuple(updated),
        favorited=inp.notice_id in updated,
    )


def favorite_notices(favorite_ids: Iterable[str], notices: Iterable[Notice]) -> list[Notice]:
    """Favorited notices in board order; ids of deleted notices are skipped."""
    wanted = set(favorite_ids)
    return [n for n in notices if n.id in wanted]
