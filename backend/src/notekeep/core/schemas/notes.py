"""
Note schemas.

Create and update share one request body: both fields are required and an
update overwrites both.
"""

import uuid
from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from ..models.note import Note
from .common import CamelModel, not_blank


class NoteRequest(CamelModel):
    """Note create/update request schema."""

    title: str = Field(max_length=255, description="Note title")
    content: str = Field(description="Note content (HTML)")

    @field_validator("title", "content")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return not_blank(value)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Meeting notes",
                "content": "<p>Agenda: <strong>Q4 planning</strong></p>",
            }
        }
    )


class NoteResponse(CamelModel):
    """Note as returned to its owner."""

    id: uuid.UUID
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    user_id: uuid.UUID = Field(description="Owner id")
    username: str = Field(description="Owner username")

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
            user_id=note.owner.id,
            username=note.owner.username,
        )
