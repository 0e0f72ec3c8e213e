"""
Email-related Pydantic models.

Field names are snake_case; the server's camelCase keys are accepted
through aliases. Timestamps arrive as ISO-8601 strings and are parsed
into timezone-aware datetimes.
"""
from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field


class VanishModel(BaseModel):
    """Base for immutable response models."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class AttachmentMeta(VanishModel):
    """Metadata for an email attachment (content is fetched separately)."""
    id: str
    name: str
    type: str  # MIME type
    size: int  # bytes


class EmailSummary(VanishModel):
    """Summary of an email in the mailbox list."""
    id: str
    sender: str = Field(alias="from")
    subject: str
    text_preview: str = Field(alias="textPreview")
    received_at: datetime = Field(alias="receivedAt")
    has_attachments: bool = Field(alias="hasAttachments")


class EmailDetail(VanishModel):
    """Full email details with attachments."""
    id: str
    sender: str = Field(alias="from")
    to: List[str] = []
    subject: str
    html: str = ""
    text: str = ""
    received_at: datetime = Field(alias="receivedAt")
    has_attachments: bool = Field(default=False, alias="hasAttachments")
    attachments: List[AttachmentMeta] = []


class PaginatedEmailList(VanishModel):
    """One page of email summaries."""
    data: List[EmailSummary]
    next_cursor: Optional[str] = Field(default=None, alias="nextCursor")
    total: int


class AttachmentContent(VanishModel):
    """Raw attachment bytes with the response headers, untouched."""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    data: bytes
    headers: httpx.Headers

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("content-type")
