"""
Contact module data models.
"""

from typing import Optional
from pydantic import EmailStr, Field

from shared.models import CamelModel


class ContactRequest(CamelModel):
    """A support message from the contact form."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    category: Optional[str] = Field(None, description="e.g. general, technical, billing")
    message: str = Field(..., min_length=1, max_length=5000)


class ContactResponse(CamelModel):
    """Acknowledgement with the generated ticket id."""

    message: str
    ticket_id: str
