"""Shared schema base: camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase aliases; accepts either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserSummary(CamelModel):
    """Public view of a user embedded in other resources (no password, no role)."""

    id: int
    name: str
    email: str


class MessageResponse(BaseModel):
    """Plain confirmation message (logout, deletes)."""

    message: str = Field(..., description="Human-readable confirmation")
