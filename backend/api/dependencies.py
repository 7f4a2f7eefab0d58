"""FastAPI dependencies resolving objects created at startup."""

from fastapi import Request

from domain.shared.errors import RepositoryError
from domain.user.core.ports.user_repository import IUserRepository


def get_user_repository(request: Request) -> IUserRepository:
    """Return the repository the lifespan stored on ``app.state``.

    Raises:
        RepositoryError: If startup has not set one up
    """
    repository = getattr(request.app.state, "user_repository", None)
    if repository is None:
        raise RepositoryError("resolve_repository", "users")
    return repository
