"""
Tests for the status notification templates.
"""

import pytest

from app.services.email_templates import resolve_status_email


class TestRecognizedStatuses:
    """Each recognized label yields a subject and body"""

    @pytest.mark.parametrize("status", ["In Review", "Accepted", "Rejected"])
    def test_subject_and_body_mention_job_and_applicant(self, status):
        email = resolve_status_email("Sam Seeker", "Data Engineer", status)

        assert email is not None
        assert "Data Engineer" in email.subject
        assert "Sam Seeker" in email.subject
        assert "Data Engineer" in email.text
        assert "Sam Seeker" in email.text

    def test_accepted_wording(self):
        email = resolve_status_email("Sam", "QA Lead", "Accepted")
        assert email.subject.startswith("Congratulations")
        assert "has been accepted" in email.text

    def test_rejected_wording(self):
        email = resolve_status_email("Sam", "QA Lead", "Rejected")
        assert "has been rejected" in email.text

    def test_text_greets_applicant_and_signs_off(self):
        email = resolve_status_email("Sam", "QA Lead", "In Review")
        assert email.text.startswith("Hello Sam,\n\n")
        assert email.text.endswith("Best regards,\nCompany Team")


class TestHtmlBody:
    """HTML body derived from the text body"""

    def test_newlines_become_line_breaks(self):
        email = resolve_status_email("Sam", "QA Lead", "Accepted")
        assert "\n" not in email.html
        assert email.html.count("<br>") == email.text.count("\n")

    def test_html_is_escaped(self):
        email = resolve_status_email("<b>Sam</b>", "R&D Engineer", "In Review")
        assert "&lt;b&gt;Sam&lt;/b&gt;" in email.html
        assert "R&amp;D Engineer" in email.html


class TestUnrecognizedStatuses:
    """Any other label means no email"""

    @pytest.mark.parametrize("status", ["Interview", "accepted", "", "In review", "Hired"])
    def test_returns_none(self, status):
        assert resolve_status_email("Sam", "QA Lead", status) is None
