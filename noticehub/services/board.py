from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from noticehub.adapters.clock import SystemClock
from noticehub.adapters.kv import (
    KVFavoritesRepo,
    KVNoticeRepo,
    KVSessionStore,
    KVUserRepo,
    StoreKeys,
)
from noticehub.adapters.memory_store import InMemoryKeyValueStore
from noticehub.adapters.sqlite_store import create_sqlite_store
from noticehub.components import bootstrap
from noticehub.components.accounts import (
    AccountOutput,
    LoginInput,
    RegisterInput,
    run_current_session,
    run_login,
    run_logout,
    run_register,
    run_require_session,
)
from noticehub.components.favorites import (
    FavoritesOutput,
    ToggleFavoriteInput,
    favorite_notices,
    run_get_favorites,
    run_toggle_favorite,
)
from noticehub.components.notices import (
    AddNoticeInput,
    DeleteNoticeInput,
    NoticeOutput,
    TogglePublishInput,
    run_add_notice,
    run_delete_notice,
    run_list_notices,
    run_toggle_publish,
    visible_notices,
)
from noticehub.components.profile import (
    ChangePasswordInput,
    DeleteAccountInput,
    ProfileOutput,
    UpdateProfileInput,
    run_change_password,
    run_delete_own_account,
    run_update_profile,
)
from noticehub.components.users_admin import (
    DeleteUserInput,
    UserAdminOutput,
    run_delete_user,
    run_list_users,
)
from noticehub.domain.entities import Notice, RoleType, Session, User
from noticehub.domain.policy import PolicyEngine
from noticehub.ports.clock import ClockPort
from noticehub.ports.repo import (
    FavoritesRepoPort,
    NoticeRepoPort,
    SessionStorePort,
    UserRepoPort,
)
from noticehub.ports.store import KeyValueStorePort
from noticehub.rules.loader import default_rules
from noticehub.rules.models import Rules


@dataclass
class NoticeBoard:
    """
    Facade over the local store.

    Reads the current-session slot and hands it to the component functions
    as an explicit actor; the components themselves never look at the slot
    for authorization.
    """

    user_repo: UserRepoPort
    notice_repo: NoticeRepoPort
    favorites_repo: FavoritesRepoPort
    session_store: SessionStorePort
    policy: PolicyEngine
    clock: ClockPort
    rules: Rules

    @classmethod
    def create(
        cls,
        rules: Rules | None = None,
        store: KeyValueStorePort | None = None,
        *,
        db_path: str | Path | None = None,
        clock: ClockPort | None = None,
    ) -> NoticeBoard:
        rules = rules or default_rules()
        if store is None:
            if rules.storage.backend == "memory":
                store = InMemoryKeyValueStore()
            else:
                store = create_sqlite_store(db_path, default_path=rules.storage.path)

        keys = StoreKeys(prefix=rules.storage.key_prefix)
        return cls(
            user_repo=KVUserRepo(store, keys),
            notice_repo=KVNoticeRepo(store, keys),
            favorites_repo=KVFavoritesRepo(store, keys),
            session_store=KVSessionStore(store, keys),
            policy=PolicyEngine(rules),
            clock=clock or SystemClock(),
            rules=rules,
        )

    # --- Bootstrap ---

    def seed_if_empty(self) -> bootstrap.BootstrapOutput:
        return bootstrap.run(
            bootstrap.BootstrapInput(seed=self.rules.seed),
            user_repo=self.user_repo,
            notice_repo=self.notice_repo,
            clock=self.clock,
        )

    # --- Session & authentication ---

    def register(self, name: str, email: str, password: str, role: RoleType) -> AccountOutput:
        inp = RegisterInput(name=name, email=email, password=password, role=role)
        return run_register(inp, self.user_repo, self.clock)

    def login(self, email: str, password: str) -> AccountOutput:
        return run_login(LoginInput(email=email, password=password), self.user_repo, self.session_store)

    def logout(self) -> AccountOutput:
        return run_logout(self.session_store)

    def current_session(self) -> Session | None:
        return run_current_session(self.session_store)

    def require_session(self) -> Session | None:
        return run_require_session(self.session_store)

    # --- Profile ---

    def update_profile(self, name: str, email: str) -> ProfileOutput:
        inp = UpdateProfileInput(actor=self.current_session(), name=name, email=email)
        return run_update_profile(inp, self.user_repo, self.session_store)

    def change_password(self, old_password: str, new_password: str) -> ProfileOutput:
        inp = ChangePasswordInput(
            actor=self.current_session(), old_password=old_password, new_password=new_password
        )
        return run_change_password(inp, self.user_repo)

    def delete_own_account(self) -> ProfileOutput:
        inp = DeleteAccountInput(actor=self.current_session())
        return run_delete_own_account(inp, self.user_repo, self.notice_repo, self.session_store)

    # --- Notices ---

    def add_notice(self, title: str, body: str) -> NoticeOutput:
        inp = AddNoticeInput(actor=self.current_session(), title=title, body=body)
        return run_add_notice(inp, self.notice_repo, self.policy, self.clock)

    def delete_notice(self, notice_id: str) -> NoticeOutput:
        inp = DeleteNoticeInput(actor=self.current_session(), notice_id=notice_id)
        return run_delete_notice(inp, self.notice_repo, self.policy)

    def toggle_publish(self, notice_id: str) -> NoticeOutput:
        inp = TogglePublishInput(actor=self.current_session(), notice_id=notice_id)
        return run_toggle_publish(inp, self.notice_repo, self.policy)

    def list_notices(self) -> list[Notice]:
        return list(run_list_notices(self.notice_repo).notices)

    def visible_notices(self) -> list[Notice]:
        """Notices the current session may see on its dashboard."""
        session = self.current_session()
        return visible_notices(self.list_notices(), session.role if session else None, self.policy)

    # --- Favorites ---

    def get_favorites(self, user_id: str) -> list[str]:
        return list(run_get_favorites(user_id, self.favorites_repo).notice_ids)

    def toggle_favorite(self, user_id: str, notice_id: str) -> FavoritesOutput:
        inp = ToggleFavoriteInput(user_id=user_id, notice_id=notice_id)
        return run_toggle_favorite(inp, self.favorites_repo)

    def favorite_notices(self, user_id: str) -> list[Notice]:
        return favorite_notices(self.get_favorites(user_id), self.list_notices())

    # --- User administration ---

    def list_users(self) -> list[User]:
        return list(run_list_users(self.user_repo).users)

    def delete_user(self, target_id: str) -> UserAdminOutput:
        inp = DeleteUserInput(actor=self.current_session(), target_id=target_id)
        return run_delete_user(inp, self.user_repo, self.policy)
