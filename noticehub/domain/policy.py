from noticehub.domain.entities import Session
from noticehub.rules.models import Rules

# Actions checked by the board
CREATE_NOTICE = "notices:create"
DELETE_NOTICE = "notices:delete"
PUBLISH_NOTICE = "notices:publish"
MANAGE_USERS = "users:manage"


class PolicyEngine:
    def __init__(self, rules: Rules):
        self.rules = rules

    def role_allows(self, role: str, action: str) -> bool:
        """
        A role grants an action when its permission list holds the action
        itself, "*", or the scoped wildcard "<scope>:*".
        """
        allowed_actions = self.rules.rbac.roles.get(role, [])
        if "*" in allowed_actions or action in allowed_actions:
            return True

        if ":" in action:
            scope = action.split(":")[0]
            if f"{scope}:*" in allowed_actions:
                return True

        return False

    def check_permission(self, actor: Session | None, action: str) -> bool:
        # Anonymous callers are never allowed
        if actor is None:
            return False
        return self.role_allows(actor.role, action)

    def can_manage_users(self, actor: Session | None) -> bool:
        return self.check_permission(actor, MANAGE_USERS)

    def can_see_unpublished(self, role: str | None) -> bool:
        return role is not None and self.role_allows(role, PUBLISH_NOTICE)
