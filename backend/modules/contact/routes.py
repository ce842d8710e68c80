"""
Contact API endpoint.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_contact_service

from .models import ContactRequest, ContactResponse
from .service import ContactService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ContactResponse)
async def submit_contact_form(
    request: ContactRequest,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """
    Submit a support message and get a ticket id back.
    """
    try:
        return await service.submit(request)
    except Exception:
        logger.exception("Contact form error")
        raise HTTPException(status_code=500, detail="Failed to submit contact form")
