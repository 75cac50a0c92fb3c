"""User Repository — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - Session is injected per instance; the repository holds no other state
    - Each operation is a single statement followed by one commit
    - Missing row on read/update raises NotFoundError
    - Any SQLAlchemyError rolls back and surfaces as StoreError (driver message kept)
    - delete_by_id on a missing id is a silent no-op

Design Decisions:
    - session.get() for id lookups: hits the identity map first, one SELECT otherwise
    - Bulk DELETE statement over load-then-delete: idempotent without a read
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from perqara_api.core.domain_types import Sex, UserId
from perqara_api.core.errors import NotFoundError
from perqara_api.infrastructure.database import store_error_from
from perqara_api.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """User persistence backed by an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_all(self) -> list[User]:
        try:
            result = await self._session.execute(
                select(User).order_by(User.id),
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._fail(e, "list") from e

    async def get_by_id(self, user_id: UserId) -> User:
        try:
            user = await self._session.get(User, user_id)
        except SQLAlchemyError as e:
            raise await self._fail(e, "get") from e
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def create(self, name: str, address: str, sex: Sex) -> User:
        user = User(name=name, address=address, sex=Sex(sex).value)
        try:
            self._session.add(user)
            await self._session.commit()
            await self._session.refresh(user)
        except SQLAlchemyError as e:
            raise await self._fail(e, "create") from e
        logger.info("User created", extra={"user_id": user.id})
        return user

    async def update_by_id(
        self, user_id: UserId, name: str, address: str, sex: Sex,
    ) -> User:
        user = await self.get_by_id(user_id)
        user.name = name
        user.address = address
        user.sex = Sex(sex).value
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            raise await self._fail(e, "update") from e
        logger.info("User updated", extra={"user_id": user_id})
        return user

    async def delete_by_id(self, user_id: UserId) -> None:
        try:
            result = await self._session.execute(
                delete(User).where(User.id == user_id),
            )
            await self._session.commit()
        except SQLAlchemyError as e:
            raise await self._fail(e, "delete") from e
        if result.rowcount:
            logger.info("User deleted", extra={"user_id": user_id})

    async def _fail(self, exc: SQLAlchemyError, operation: str):
        """Roll back and build the StoreError for a failed operation."""
        await self._session.rollback()
        logger.error(
            f"User {operation} failed: {exc}",
            extra={"error_code": "STORE_ERROR"},
        )
        return store_error_from(exc, operation)
