"""
Contact module.

Accepts support messages from the storefront and hands back a ticket
id. Submissions are only logged; there is no ticketing backend.
"""

from .models import ContactRequest, ContactResponse
from .service import ContactService

__all__ = [
    "ContactRequest",
    "ContactResponse",
    "ContactService",
]
