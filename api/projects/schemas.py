"""
Project API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProjectIn(BaseModel):
    project: str = Field(..., min_length=1, max_length=500)
    link: str = Field(..., min_length=1, max_length=2000)


class Project(BaseModel):
    id: int
    project: str | None = None
    link: str | None = None


class ProjectAdded(BaseModel):
    message: str = "added"
    data: Project


class ProjectUpdated(BaseModel):
    message: str = "updated"
