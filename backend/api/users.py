"""REST API endpoints for the user collection.

Two operations over schema-less user documents:
- ``GET /users``: every stored document, in store order
- ``POST /users``: store the body verbatim, return it with its ``_id``

Storage failures surface as RepositoryError and are turned into a generic
500 by the handler in ``api.errors``.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from api.dependencies import get_user_repository
from api.schemas import UserCreate
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get("/users")
async def list_users(
    repository: IUserRepository = Depends(get_user_repository),
) -> List[Dict[str, Any]]:
    users = await repository.list_all()
    logger.debug("users.list", extra={"count": len(users)})
    return users


@router.post("/users")
async def create_user(
    payload: UserCreate,
    repository: IUserRepository = Depends(get_user_repository),
) -> Dict[str, Any]:
    user = await repository.create(payload.model_dump())
    logger.info("users.create", extra={"user_id": user.get("_id")})
    return user
