"""Boundary Protocols — contracts between route handlers and persistence.

Invariants:
    - Handlers depend on UserRepository, never on a concrete store
    - Implementations receive their store handle explicitly (no module globals)
    - Missing rows raise NotFoundError; every other store failure raises StoreError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from perqara_api.core.domain_types import Sex, UserId


class UserLike(Protocol):
    """Structural contract for User records returned by a repository."""
    id: int
    name: str
    address: str
    sex: str


class UserRepository(Protocol):
    """Contract for User persistence — implemented by infrastructure."""
    async def list_all(self) -> list[UserLike]: ...
    async def get_by_id(self, user_id: UserId) -> UserLike: ...
    async def create(self, name: str, address: str, sex: Sex) -> UserLike: ...
    async def update_by_id(
        self, user_id: UserId, name: str, address: str, sex: Sex,
    ) -> UserLike: ...
    async def delete_by_id(self, user_id: UserId) -> None: ...
