"""Contact form schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ContactSubmitted(BaseModel):
    success: bool = True
    id: str


class ContactRequest(BaseModel):
    """Stored contact form submission (admin view)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    phone: str
    message: str
    meta: Optional[dict[str, Any]] = None
    created_at: datetime
