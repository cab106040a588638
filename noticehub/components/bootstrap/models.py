from dataclasses import dataclass, field

from noticehub.domain.entities import Notice, User
from noticehub.rules.models import SeedRules


@dataclass(frozen=True)
class BootstrapInput:
    seed: SeedRules


@dataclass(frozen=True)
class BootstrapOutput:
    success: bool = True
    created_users: list[User] = field(default_factory=list)
    created_notice: Notice | None = None
    skipped_reason: str | None = None

    @property
    def created(self) -> bool:
        return bool(self.created_users) or self.created_notice is not None
