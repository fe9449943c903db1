"""Tests for contact form notifications."""

import smtplib
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from app.core.config import Settings
from app.services.mailer import build_contact_message, send_contact_notification


def smtp_settings(**overrides) -> Settings:
    values = {
        "JWT_SECRET": "x" * 32,
        "SMTP_HOST": "smtp.example.com",
        "SMTP_PORT": 587,
        "SMTP_USER": "mailer@example.com",
        "SMTP_PASS": "hunter2",
        "CONTACTS_TO": "sales@example.com",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def smtp(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("smtplib.SMTP")


def test_skipped_without_smtp_host(smtp: MagicMock) -> None:
    sent = send_contact_notification(
        "Ann", "ann@example.com", "+7 700", "Hello", config=smtp_settings(SMTP_HOST=None)
    )

    assert sent is False
    smtp.assert_not_called()


def test_sends_over_starttls(smtp: MagicMock) -> None:
    sent = send_contact_notification(
        "Ann", "ann@example.com", "+7 700", "Hello", config=smtp_settings()
    )

    assert sent is True
    smtp.assert_called_once_with("smtp.example.com", 587)
    client = smtp.return_value
    client.starttls.assert_called_once()
    client.login.assert_called_once_with("mailer@example.com", "hunter2")
    mail = client.send_message.call_args.args[0]
    assert mail["To"] == "sales@example.com"
    assert mail["From"] == "mailer@example.com"
    assert mail["Reply-To"] == "ann@example.com"


def test_port_465_uses_ssl(mocker: MockerFixture, smtp: MagicMock) -> None:
    smtp_ssl = mocker.patch("smtplib.SMTP_SSL")

    sent = send_contact_notification(
        "Ann", "ann@example.com", "", "Hello", config=smtp_settings(SMTP_PORT=465)
    )

    assert sent is True
    smtp_ssl.assert_called_once_with("smtp.example.com", 465)
    smtp_ssl.return_value.starttls.assert_not_called()
    smtp.assert_not_called()


def test_smtp_failure_returns_false(smtp: MagicMock) -> None:
    smtp.return_value.send_message.side_effect = smtplib.SMTPException("rejected")

    sent = send_contact_notification(
        "Ann", "ann@example.com", "", "Hello", config=smtp_settings()
    )

    assert sent is False


def test_connection_error_returns_false(smtp: MagicMock) -> None:
    smtp.side_effect = ConnectionRefusedError()

    assert (
        send_contact_notification(
            "Ann", "ann@example.com", "", "Hello", config=smtp_settings()
        )
        is False
    )


def test_build_contact_message_with_attachment(tmp_path) -> None:
    resume = tmp_path / "1700000000000-cv.pdf"
    resume.write_bytes(b"%PDF-1.4 cv")

    mail = build_contact_message(
        "Ann <script>",
        "ann@example.com",
        "+7 700",
        "Line one\nLine two",
        sender="noreply@example.com",
        recipient="sales@example.com",
        attachment=resume,
        attachment_name="cv.pdf",
    )

    assert mail["Subject"] == "New Contact Form Submission from Ann <script>"
    html = mail.get_body(preferencelist=("html",)).get_content()
    assert "Ann &lt;script&gt;" in html
    assert "Line one<br>Line two" in html
    attachments = list(mail.iter_attachments())
    assert len(attachments) == 1
    assert attachments[0].get_filename() == "cv.pdf"
    assert attachments[0].get_content() == b"%PDF-1.4 cv"


def test_build_contact_message_plain_text() -> None:
    mail = build_contact_message(
        "Ann", "ann@example.com", "", "Hi", sender="a@example.com", recipient="b@example.com"
    )

    text = mail.get_body(preferencelist=("plain",)).get_content()
    assert "Name: Ann" in text
    assert list(mail.iter_attachments()) == []
