"""Request/response models for the REST API."""

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Body of ``POST /users``.

    Declares no fields: any JSON object is accepted and its keys are kept as
    extras, so ``model_dump()`` returns the body verbatim. Non-object bodies
    are rejected by request validation (422).
    """

    model_config = ConfigDict(extra="allow")


class MessageResponse(BaseModel):
    """Static acknowledgment returned by the root endpoint."""

    message: str


class ErrorResponse(BaseModel):
    """Response model for server errors."""

    error: str
