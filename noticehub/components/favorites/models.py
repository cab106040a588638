from dataclasses import dataclass


@dataclass(frozen=True)
class ToggleFavoriteInput:
    user_id: str
    notice_id: str


@dataclass(frozen=True)
class FavoritesOutput:
    user_id: str
    notice_ids: tuple[str, ...]
    favorited: bool | None = None
    success: bool = True
