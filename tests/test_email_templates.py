"""Tests for receipt and follow-up email builders."""

from datetime import datetime, timedelta, timezone

import pytest

from aptskola_mailer.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Create settings with default sender identities."""
    return Settings(_env_file=None)


class TestStripDataUriPrefix:
    """Tests for strip_data_uri_prefix."""

    def test_strips_pdf_data_uri_prefix(self):
        """A data URI prefix should be removed."""
        from aptskola_mailer.services.email_templates import strip_data_uri_prefix

        assert strip_data_uri_prefix("data:application/pdf;base64,AAAA") == "AAAA"

    def test_leaves_raw_base64_unchanged(self):
        """Raw base64 without a prefix should pass through."""
        from aptskola_mailer.services.email_templates import strip_data_uri_prefix

        assert strip_data_uri_prefix("AAAA") == "AAAA"

    def test_stripping_twice_is_stable(self):
        """Stripping an already stripped payload should change nothing."""
        from aptskola_mailer.services.email_templates import strip_data_uri_prefix

        once = strip_data_uri_prefix("data:application/pdf;base64,JVBERi0x")
        assert strip_data_uri_prefix(once) == once == "JVBERi0x"

    def test_prefix_must_be_at_start(self):
        """A data URI appearing mid-string should not be touched."""
        from aptskola_mailer.services.email_templates import strip_data_uri_prefix

        value = "AAAAdata:application/pdf;base64,BBBB"
        assert strip_data_uri_prefix(value) == value

    def test_malformed_prefix_passes_through(self):
        """A prefix without ;base64, should pass through unchanged."""
        from aptskola_mailer.services.email_templates import strip_data_uri_prefix

        assert strip_data_uri_prefix("data:application/pdf,AAAA") == (
            "data:application/pdf,AAAA"
        )


class TestScheduledAt:
    """Tests for scheduled delivery timestamps."""

    def test_adds_72_hours_in_iso_format(self):
        """The follow-up instant should be 259200000 ms after now."""
        from aptskola_mailer.services.email_templates import scheduled_at

        now = datetime(2026, 10, 19, 8, 30, 15, 123000, tzinfo=timezone.utc)
        assert scheduled_at(now, timedelta(milliseconds=259200000)) == (
            "2026-10-22T08:30:15.123Z"
        )

    def test_converts_to_utc(self):
        """Non-UTC datetimes should be rendered in UTC."""
        from aptskola_mailer.services.email_templates import format_instant

        ist = timezone(timedelta(hours=5, minutes=30))
        moment = datetime(2026, 10, 19, 12, 0, 0, tzinfo=ist)
        assert format_instant(moment) == "2026-10-19T06:30:00.000Z"


class TestBuildReceiptEmail:
    """Tests for build_receipt_email."""

    def test_receipt_payload_shape(self, settings: Settings):
        """Receipt should carry one PDF attachment and no schedule."""
        from aptskola_mailer.services.email_templates import build_receipt_email

        email = build_receipt_email(
            settings,
            recipient_email="parent@example.com",
            recipient_name="Priya",
            pdf_base64="AAAA",
        )
        payload = email.to_payload()

        assert payload["sender"] == {
            "email": "connect@aptskola.com",
            "name": "Apt Skola Support",
        }
        assert payload["to"] == [{"email": "parent@example.com", "name": "Priya"}]
        assert payload["subject"] == "Safe Keeping: Your AptSkola Admission Toolkit"
        assert payload["attachment"] == [
            {
                "content": "AAAA",
                "name": "AptSkola-Admissions-Toolkit.pdf",
                "type": "application/pdf",
            }
        ]
        assert "scheduledAt" not in payload
        assert "Hi Priya," in payload["htmlContent"]

    def test_recipient_name_is_html_escaped(self, settings: Settings):
        """Names should not inject markup into the template."""
        from aptskola_mailer.services.email_templates import build_receipt_email

        email = build_receipt_email(
            settings,
            recipient_email="parent@example.com",
            recipient_name="<b>Eve</b>",
            pdf_base64="AAAA",
        )

        assert "<b>Eve</b>" not in email.htmlContent
        assert "&lt;b&gt;Eve&lt;/b&gt;" in email.htmlContent
        assert email.to[0].name == "<b>Eve</b>"


class TestBuildFollowupEmail:
    """Tests for build_followup_email."""

    def test_followup_payload_shape(self, settings: Settings):
        """Follow-up should be scheduled and carry no attachment."""
        from aptskola_mailer.services.email_templates import build_followup_email

        email = build_followup_email(
            settings,
            recipient_email="parent@example.com",
            recipient_name="Parent",
            deliver_at="2026-10-22T08:30:15.123Z",
        )
        payload = email.to_payload()

        assert payload["sender"] == {
            "email": "Harish@aptskola.com",
            "name": "Harish from AptSkola",
        }
        assert payload["subject"] == "One quick question about your kid's admission..."
        assert payload["scheduledAt"] == "2026-10-22T08:30:15.123Z"
        assert "attachment" not in payload
        assert "Hi Parent," in payload["htmlContent"]

    def test_followup_keeps_original_wording(self, settings: Settings):
        """The follow-up body should keep its fixed copy."""
        from aptskola_mailer.services.email_templates import build_followup_email

        email = build_followup_email(
            settings,
            recipient_email="parent@example.com",
            recipient_name="Parent",
            deliver_at="2026-10-22T08:30:15.123Z",
        )

        assert "I’m curious—did the <strong>Fee Forecaster</strong>" in email.htmlContent
