"""Pydantic schemas for API responses."""

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str


class RedirectEntryResponse(BaseModel):
    """A single legacy path -> current path pair."""

    model_config = ConfigDict(from_attributes=True)

    old_path: str
    new_path: str


class RedirectListResponse(BaseModel):
    """The full redirect table, in authoring order.

    Static-site builds fetch this to emit their own redirect rules.
    """

    count: int
    redirects: list[RedirectEntryResponse]


class RedirectLookupResponse(BaseModel):
    """Result of looking up one path."""

    path: str
    target: str | None = None
    found: bool
