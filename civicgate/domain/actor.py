"""
Actors

The signed-in identity behind a request, resolved from the session cookie.
Each variant answers ``can_manage(menu_code)``; handlers never branch on the
account kind themselves.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, Optional
from uuid import UUID

from civicgate.domain.entities.enums import ActorType, AdminMenuCode


class Actor(ABC):
    actor_type: Optional[ActorType] = None

    @property
    def is_authenticated(self) -> bool:
        return self.actor_type is not None

    @property
    def block_reason(self) -> Optional[str]:
        return None

    @property
    def is_blocked(self) -> bool:
        return False

    @abstractmethod
    def can_manage(self, menu_code: AdminMenuCode) -> bool:
        pass


@dataclass(frozen=True)
class BlockState:
    blocked: bool = False
    reason: Optional[str] = None

    @classmethod
    def first_of(cls, *states: "BlockState") -> "BlockState":
        """Account-level block wins over the owning organization's block."""
        for state in states:
            if state.blocked:
                return state
        return cls()


class _AccountActor(Actor):
    block: BlockState

    @property
    def block_reason(self) -> Optional[str]:
        return self.block.reason if self.block.blocked else None

    @property
    def is_blocked(self) -> bool:
        return self.block.blocked


class AnonymousActor(Actor):
    def can_manage(self, menu_code: AdminMenuCode) -> bool:
        return False

    def __repr__(self) -> str:
        return "AnonymousActor()"


@dataclass(frozen=True)
class AdminActor(_AccountActor):
    id: UUID
    tenant_id: UUID
    name: str
    email: str
    role: str
    block: BlockState = field(default_factory=BlockState)
    actor_type: ActorType = field(default=ActorType.admin, init=False)

    def can_manage(self, menu_code: AdminMenuCode) -> bool:
        return True


@dataclass(frozen=True)
class ElectedOfficialActor(_AccountActor):
    id: UUID
    tenant_id: UUID
    first_name: str
    last_name: str
    email: Optional[str]
    has_full_access: bool
    menu_permissions: FrozenSet[AdminMenuCode] = frozenset()
    block: BlockState = field(default_factory=BlockState)
    actor_type: ActorType = field(default=ActorType.elected_official, init=False)

    def can_manage(self, menu_code: AdminMenuCode) -> bool:
        if self.has_full_access:
            return True
        return menu_code in self.menu_permissions


@dataclass(frozen=True)
class AssociationUserActor(_AccountActor):
    id: UUID
    tenant_id: UUID
    association_id: UUID
    name: str
    email: str
    role: str
    block: BlockState = field(default_factory=BlockState)
    actor_type: ActorType = field(default=ActorType.association_user, init=False)

    # Scoped to its own association by the resolver; full access inside it.
    def can_manage(self, menu_code: AdminMenuCode) -> bool:
        return True


@dataclass(frozen=True)
class SuperadminActor(Actor):
    id: UUID
    name: str
    email: str
    actor_type: ActorType = field(default=ActorType.superadmin, init=False)

    def can_manage(self, menu_code: AdminMenuCode) -> bool:
        return True


ANONYMOUS = AnonymousActor()


def has_menu_access(actor: Actor, menu_code: AdminMenuCode) -> bool:
    return actor.can_manage(menu_code)
