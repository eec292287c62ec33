"""
Auth contracts (API response schemas).
"""

from pydantic import BaseModel, ConfigDict


class UserPublic(BaseModel):
    """Signed-in user response model."""

    model_config = ConfigDict(from_attributes=True)

    uid: str
    name: str | None = None
    email: str | None = None
    profile_picture: str | None = None
