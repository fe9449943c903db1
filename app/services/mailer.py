"""Contact form e-mail notifications over SMTP."""

import smtplib
from email.message import EmailMessage
from html import escape
from pathlib import Path

from app.core.config import Settings, settings
from app.core.logging import get_logger

logger = get_logger("app.services.mailer")


def build_contact_message(
    name: str,
    email: str,
    phone: str,
    message: str,
    sender: str,
    recipient: str,
    attachment: Path | None = None,
    attachment_name: str | None = None,
) -> EmailMessage:
    """Compose the notification for one contact form submission."""
    mail = EmailMessage()
    mail["Subject"] = f"New Contact Form Submission from {name}"
    mail["From"] = sender
    mail["To"] = recipient
    mail["Reply-To"] = email

    body = "\n".join(
        [
            f"Name: {name}",
            f"Email: {email}",
            f"Phone: {phone}",
            "",
            message,
        ]
    )
    mail.set_content(body)

    html = (
        "<h2>New Contact Form Submission</h2>"
        f"<p><strong>Name:</strong> {escape(name)}</p>"
        f"<p><strong>Email:</strong> {escape(email)}</p>"
        f"<p><strong>Phone:</strong> {escape(phone)}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{escape(message).replace(chr(10), '<br>')}</p>"
    )
    if attachment is not None:
        html += f"<p><strong>Resume:</strong> {escape(attachment_name or attachment.name)}</p>"
    mail.add_alternative(html, subtype="html")

    if attachment is not None:
        mail.add_attachment(
            attachment.read_bytes(),
            maintype="application",
            subtype="octet-stream",
            filename=attachment_name or attachment.name,
        )
    return mail


def send_contact_notification(
    name: str,
    email: str,
    phone: str,
    message: str,
    attachment: Path | None = None,
    attachment_name: str | None = None,
    config: Settings | None = None,
) -> bool:
    """Mail a contact form submission to the configured inbox.

    Runs as a background task after the request has been answered, so SMTP
    failures are logged and never reach the client.

    Returns:
        True if the message was handed to the SMTP server
    """
    config = config or settings
    if not config.smtp_enabled:
        logger.debug("contact_notification_skipped", reason="smtp_not_configured")
        return False

    mail = build_contact_message(
        name,
        email,
        phone,
        message,
        sender=config.SMTP_FROM or config.SMTP_USER or "noreply@localhost",
        recipient=config.CONTACTS_TO or "",
        attachment=attachment,
        attachment_name=attachment_name,
    )

    try:
        if config.SMTP_PORT == 465:
            client: smtplib.SMTP = smtplib.SMTP_SSL(config.SMTP_HOST or "", config.SMTP_PORT)
        else:
            client = smtplib.SMTP(config.SMTP_HOST or "", config.SMTP_PORT)
        with client:
            client.ehlo()
            if config.SMTP_PORT != 465 and client.has_extn("starttls"):
                client.starttls()
            if config.SMTP_USER and config.SMTP_PASS:
                client.login(config.SMTP_USER, config.SMTP_PASS)
            client.send_message(mail)
    except (smtplib.SMTPException, OSError) as e:
        logger.error("contact_notification_failed", error=str(e), recipient=mail["To"])
        return False

    logger.info("contact_notification_sent", recipient=mail["To"])
    return True
