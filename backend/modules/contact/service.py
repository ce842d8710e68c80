"""
Contact form handling.
"""

import logging
import time
from collections.abc import Callable

from .models import ContactRequest, ContactResponse

logger = logging.getLogger(__name__)


class ContactService:
    """
    Acknowledges contact form submissions.

    Ticket ids are ``TICKET-<epoch milliseconds>``.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock

    def new_ticket_id(self) -> str:
        return f"TICKET-{int(self._clock() * 1000)}"

    async def submit(self, request: ContactRequest) -> ContactResponse:
        ticket_id = self.new_ticket_id()
        logger.info(
            "Contact form submission %s: category=%s subject=%r",
            ticket_id,
            request.category,
            request.subject,
        )
        return ContactResponse(
            message="Contact form submitted successfully",
            ticket_id=ticket_id,
        )
