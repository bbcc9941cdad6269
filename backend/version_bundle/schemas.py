"""Pydantic schemas for the version endpoint's response bodies."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class VersionResponse(BaseModel):
    """Body returned once the version has been resolved."""

    model_config = ConfigDict(extra="forbid")

    version: str


class VersionErrorResponse(BaseModel):
    """Body returned when resolution failed or the method is rejected."""

    model_config = ConfigDict(extra="forbid")

    error: str
