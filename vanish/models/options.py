"""
Request option models.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateEmailOptions(BaseModel):
    """Options for generating a new email address."""
    model_config = ConfigDict(frozen=True)

    domain: Optional[str] = None
    prefix: Optional[str] = None  # local-part prefix

    def to_body(self) -> Optional[dict]:
        """Request body with only the set options, or None if nothing is set."""
        body = self.model_dump(exclude_none=True)
        return body or None


class ListEmailsOptions(BaseModel):
    """Options for listing emails."""
    model_config = ConfigDict(frozen=True)

    limit: Optional[int] = Field(default=None, ge=0)
    cursor: Optional[str] = None

    def to_params(self) -> dict:
        return {"limit": self.limit, "cursor": self.cursor}
