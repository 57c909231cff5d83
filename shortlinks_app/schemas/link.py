from pydantic import BaseModel, Field, computed_field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from shortlinks_app.config import settings


class LinkCreate(BaseModel):
    """Request body for creating a short link.
    
    The URL is kept as a plain string: the service validates it and stores
    it exactly as given, so "https://example.com" is not rewritten to
    "https://example.com/".
    """
    original_url: str = Field(..., description="The original URL to be shortened")
    short_code: Optional[str] = Field(
        None, description="Optional custom code (3-10 letters, digits or hyphens)"
    )

    @field_validator("short_code", mode="before")
    @classmethod
    def blank_code_means_generated(cls, value):
        # HTML forms submit empty inputs as ""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value


class LinkSummary(BaseModel):
    id: int
    original_url: str
    short_code: str

    model_config = ConfigDict(from_attributes=True)


class LinkResponse(LinkSummary):
    """Full link record, serialized straight from the SQLAlchemy model."""
    is_custom: bool
    created_at: datetime
    click_count: int

    @computed_field
    @property
    def short_url(self) -> str:
        return f"{settings.base_url}/{self.short_code}"

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    code: str
    detail: str
    short_code: Optional[str] = None
