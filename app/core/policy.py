"""Role-based authorization policy: which role may perform which action.

Kept free of FastAPI and database imports so it can be exercised directly;
the HTTP dependency wrapping it lives in app.api.deps.
"""

from enum import Enum


class Role(str, Enum):
    """Closed set of account roles."""

    ADMIN = "admin"
    STANDARD = "standard"


class Action(str, Enum):
    """Operations guarded by the policy, one per resource verb."""

    READ_ACCOUNT = "read-account"
    CREATE_ACCOUNT = "create-account"
    UPDATE_ACCOUNT = "update-account"
    DELETE_ACCOUNT = "delete-account"
    READ_ITEM = "read-item"
    CREATE_ITEM = "create-item"
    UPDATE_ITEM = "update-item"
    DELETE_ITEM = "delete-item"


READ_ACTIONS = frozenset({Action.READ_ACCOUNT, Action.READ_ITEM})

_GRANTS: dict[Role, frozenset[Action]] = {
    Role.ADMIN: frozenset(Action),
    Role.STANDARD: READ_ACTIONS,
}


def _coerce(enum_cls: type[Enum], value: object) -> Enum | None:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def can_perform(role: Role | str | None, action: Action | str) -> bool:
    """
    Return True if role may perform action.

    Unknown roles and unknown actions are denied.
    """
    resolved_role = _coerce(Role, role)
    resolved_action = _coerce(Action, action)
    if resolved_role is None or resolved_action is None:
        return False
    return resolved_action in _GRANTS.get(resolved_role, frozenset())
