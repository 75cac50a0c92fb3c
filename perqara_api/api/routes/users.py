"""User Routes — the five CRUD endpoints under /users.

Invariants:
    - Parse → Validate → Execute → Respond; handlers keep no state between requests
    - Path id parsed (dependency) before the body is validated
    - Invalid id → 400 plain text; invalid body → 400 {"message"}; any
      repository failure → propagated to the global handlers (500 / not-found switch)
    - Update responds with the row as persisted after the write

Design Decisions:
    - Repository injected through Depends: tests swap it via dependency_overrides
    - Body validation delegated to Pydantic (UserInput) + RequestValidationError handler
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from perqara_api.core.domain_types import UserId
from perqara_api.core.repository_protocols import UserRepository
from perqara_api.core.user_id import parse_user_id
from perqara_api.infrastructure.database import get_db
from perqara_api.infrastructure.user_repository import SqlUserRepository
from perqara_api.schemas.user import (
    DataEnvelope, MessageResponse, UserInput, UserRead,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
}


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return SqlUserRepository(db)


def path_user_id(user_id: str) -> UserId:
    """Path parameter → UserId (InvalidUserIdError on failure)."""
    return parse_user_id(user_id)


@router.get(
    "", response_model=DataEnvelope[list[UserRead]], responses=_ERRORS,
)
async def list_users(repo: UserRepository = Depends(get_user_repository)):
    """List every user."""
    users = await repo.list_all()
    return DataEnvelope(data=[UserRead.model_validate(u) for u in users])


@router.get(
    "/{user_id}", response_model=DataEnvelope[UserRead], responses=_ERRORS,
)
async def get_user(
    user_id: UserId = Depends(path_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    """Get a user by id."""
    user = await repo.get_by_id(user_id)
    return DataEnvelope(data=UserRead.model_validate(user))


@router.post(
    "", response_model=DataEnvelope[UserRead],
    status_code=status.HTTP_201_CREATED, responses=_ERRORS,
)
async def create_user(
    body: UserInput, repo: UserRepository = Depends(get_user_repository),
):
    """Create a user from the input payload."""
    user = await repo.create(body.name, body.address, body.sex)
    return DataEnvelope(data=UserRead.model_validate(user))


@router.put(
    "/{user_id}", response_model=DataEnvelope[UserRead], responses=_ERRORS,
)
async def update_user(
    body: UserInput,
    user_id: UserId = Depends(path_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    """Replace name, address and sex of an existing user."""
    user = await repo.update_by_id(user_id, body.name, body.address, body.sex)
    return DataEnvelope(data=UserRead.model_validate(user))


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses=_ERRORS,
)
async def delete_user(
    user_id: UserId = Depends(path_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    """Delete a user by id. Missing ids are not an error."""
    await repo.delete_by_id(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
