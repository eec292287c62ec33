"""
View Telemetry Contract Models.

Leaders returned by the trending queries.
"""

from pydantic import BaseModel


class PageViewLeader(BaseModel):
    """The most viewed page path."""

    path: str
    score: int


class EntityViewLeader(BaseModel):
    """The most viewed hostel listing."""

    entity_id: str
    score: int
