"""Contact information and contact form endpoints."""

from typing import Optional

from fastapi import (
    APIRouter,
    BackgroundTasks,
    Depends,
    File,
    Form,
    Request,
    UploadFile,
)
from pydantic import EmailStr
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import LocaleParams, get_locale_params, get_resolver
from app.api.v1.utils import localized_or_404
from app.content.resolver import LocaleResolver
from app.core.config import settings
from app.core.db import get_session
from app.core.logging import get_logger
from app.database.repositories import ContactRequestRepository
from app.models.contact import ContactSubmitted
from app.models.content import Contact
from app.models.response import Localized
from app.services.mailer import send_contact_notification
from app.services.uploads import save_upload

logger = get_logger("app.api.v1.contacts")

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("", response_model=Localized[Contact])
async def get_contacts(
    params: LocaleParams = Depends(get_locale_params),
    resolver: LocaleResolver = Depends(get_resolver),
) -> Localized[Contact]:
    """Published company contact details for the locale."""
    result = await resolver.resolve_item(
        "contacts", None, params.locale, preview=params.preview
    )
    return localized_or_404(result, Contact, "Contact information")


@router.post("", response_model=ContactSubmitted)
async def submit_contact_form(
    request: Request,
    background_tasks: BackgroundTasks,
    name: str = Form(..., min_length=1, max_length=100),
    email: EmailStr = Form(...),
    phone: str = Form(..., min_length=1, max_length=50),
    message: str = Form(..., min_length=1, max_length=2000),
    resume: Optional[UploadFile] = File(None, description="PDF, DOC or DOCX up to 10 MB"),
    session: AsyncSession = Depends(get_session),
) -> ContactSubmitted:
    """
    Store a contact form submission and notify the site owner by e-mail.

    The e-mail is sent after the response; submissions are stored even when
    SMTP is not configured.
    """
    stored = None
    if resume is not None and resume.filename:
        stored = await save_upload(
            resume,
            settings.FILE_UPLOAD_DIR,
            settings.APP_URL,
            kind="resume",
            bucket="resumes",
        )

    contact_request = await ContactRequestRepository(session).create(
        name=name,
        phone=phone,
        message=message,
        meta={
            "email": email,
            "resumeFile": stored.filename if stored else None,
            "userAgent": request.headers.get("user-agent"),
            "ip": request.client.host if request.client else None,
        },
    )
    logger.info(
        "contact_request_stored",
        contact_request_id=contact_request.id,
        has_resume=stored is not None,
    )

    background_tasks.add_task(
        send_contact_notification,
        name,
        email,
        phone,
        message,
        attachment=stored.path if stored else None,
        attachment_name=stored.original_name if stored else None,
    )
    return ContactSubmitted(id=contact_request.id)
