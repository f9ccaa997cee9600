"""
Email content for application status notifications.
"""

import html
from typing import NamedTuple, Optional

from app.models.application import ApplicationStatus


class StatusEmail(NamedTuple):
    subject: str
    text: str
    html: str


_SIGNATURE = "Best regards,\nCompany Team"


def _render(applicant_name: str, job_title: str, status: str) -> Optional[tuple]:
    if status == ApplicationStatus.IN_REVIEW.value:
        subject = f"{applicant_name}, your application for {job_title} is in review"
        body = (
            f'Your application for the position "{job_title}" is currently under review. '
            "We will get back to you soon."
        )
    elif status == ApplicationStatus.ACCEPTED.value:
        subject = f"Congratulations {applicant_name}! Application accepted for {job_title}"
        body = (
            f'Good news! Your application for "{job_title}" has been accepted. '
            "You will be contacted for the next steps or interview."
        )
    elif status == ApplicationStatus.REJECTED.value:
        subject = f"{applicant_name}, an update on your application for {job_title}"
        body = (
            f'We regret to inform you that your application for "{job_title}" has been rejected. '
            "Thank you for your interest, and we wish you the best for your future endeavors."
        )
    else:
        return None
    return subject, body


def resolve_status_email(applicant_name: str, job_title: str, status: str) -> Optional[StatusEmail]:
    """
    Build the notification sent when an application moves to ``status``.

    Args:
        applicant_name: Display name used in the greeting and subject
        job_title: Title of the job applied to
        status: New status label

    Returns:
        StatusEmail for "In Review", "Accepted" and "Rejected"; None for any
        other label, meaning no email should be sent.
    """
    rendered = _render(applicant_name, job_title, status)
    if rendered is None:
        return None

    subject, body = rendered
    text = f"Hello {applicant_name},\n\n{body}\n\n{_SIGNATURE}"
    html_body = html.escape(text).replace("\n", "<br>")
    return StatusEmail(subject=subject, text=text, html=html_body)
