"""Access Policy — owner-or-admin decision for user-scoped resources.

Invariants:
    - An actor may act on a subject's resource iff actor.id == subject OR actor is Admin
    - Denials raise ForbiddenError with a generic message (no resource detail)
    - Evaluated once by the orchestrator; the inventory ledger never re-checks

Design Decisions:
    - Actor is a frozen dataclass built from the verified token + user row,
      so the decision is a pure function over plain values
"""

from dataclasses import dataclass

from game_catalog.core.domain_types import Role, UserId
from game_catalog.core.errors import ErrorContext, ForbiddenError


@dataclass(frozen=True)
class Actor:
    """The authenticated caller."""
    id: UserId
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


def can_access(actor: Actor, subject_user_id: int) -> bool:
    """True when actor owns the subject's resources or is an Admin."""
    return actor.id == subject_user_id or actor.is_admin


def ensure_can_access(actor: Actor, subject_user_id: int) -> None:
    """Raise ForbiddenError unless can_access() holds."""
    if not can_access(actor, subject_user_id):
        raise ForbiddenError(ErrorContext(user_id=actor.id))


def ensure_admin(actor: Actor) -> None:
    """Raise ForbiddenError unless the actor is an Admin."""
    if not actor.is_admin:
        raise ForbiddenError(ErrorContext(user_id=actor.id))
