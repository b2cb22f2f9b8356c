"""
Commit history API schemas.

Request field names follow the public API (`username`, `no_of_addition`, ...);
response rows use the column names of `commit_history`.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from core.db import PG_INT_MAX


class CommitHistoryIn(BaseModel):
    username: str = Field(..., min_length=1, max_length=200)
    branch_name: str = Field(..., min_length=1, max_length=500)
    commit_date: datetime
    commit_id: str = Field(..., min_length=1, max_length=200)
    no_of_deletion: int = Field(default=0, ge=0, le=PG_INT_MAX)
    no_of_addition: int = Field(default=0, ge=0, le=PG_INT_MAX)
    project_id: int = Field(..., le=PG_INT_MAX)


class CommitHistoryEntry(BaseModel):
    id: int
    project: int | None = None
    user_name: str | None = None
    branch_name: str | None = None
    commit_date: datetime | None = None
    commit_id: str | None = None
    num_additions: int | None = None
    num_deletions: int | None = None


class CommitHistoryAdded(BaseModel):
    message: str = "added"
    data: CommitHistoryEntry
