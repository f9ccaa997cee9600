"""
Application status workflow.

An employer sets the status of an application to one of their jobs; the
applicant is then emailed a notification for the recognized labels.

Flow:
1. Load the application with its job and applicant
2. Check the requester owns the job
3. Persist the new status
4. Resolve the notification template
5. Try to send it; delivery failures are logged, never raised
6. Report success to the caller
"""

import logging
from dataclasses import dataclass
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, ForbiddenError, NotFoundError
from app.crud import application as application_crud
from app.models.application import Application, ApplicationStatus
from app.models.user import User
from app.services.email_service import MailClient
from app.services.email_templates import resolve_status_email

logger = logging.getLogger(__name__)

RECOGNIZED_STATUSES = {s.value for s in ApplicationStatus}


@dataclass
class StatusUpdateResult:
    application: Application
    status: str
    notification_sent: bool


class ApplicationStatusWorkflow:
    """
    Updates application statuses and notifies applicants.

    Args:
        mail_client: Client used for the notification email
        sender: From address of notification emails
        strict: Reject labels other than In Review / Accepted / Rejected
    """

    def __init__(self, mail_client: MailClient, sender: str, strict: bool = False):
        self.mail_client = mail_client
        self.sender = sender
        self.strict = strict

    def update_status(self, db: Session, application_id: int, requester: User, status: str) -> StatusUpdateResult:
        """
        Set the status of an application owned (through its job) by ``requester``.

        Any status may follow any other; setting the same status again is allowed.

        Raises:
            BadRequestError: Unrecognized label while in strict mode
            NotFoundError: Application does not exist
            ForbiddenError: Requester does not own the application's job
        """
        if self.strict and status not in RECOGNIZED_STATUSES:
            raise BadRequestError(f"Invalid status '{status}'")

        application = application_crud.get_by_id(db, application_id)
        if not application:
            raise NotFoundError("Application not found")

        job = application.job
        if job is None or job.company_id != requester.id:
            logger.warning(
                f"User {requester.id} denied status update on application {application_id}"
            )
            raise ForbiddenError("Not authorized to update this application")

        previous = application.status
        application.status = status
        application_crud.save(db, application)
        logger.info(f"Application {application.id} status: {previous!r} -> {status!r} (by user {requester.id})")

        notification_sent = self._notify(application, status)

        return StatusUpdateResult(application=application, status=status, notification_sent=notification_sent)

    def _notify(self, application: Application, status: str) -> bool:
        applicant = application.applicant
        if applicant is None or not applicant.email:
            logger.info(f"Application {application.id}: applicant has no email, skipping notification")
            return False

        email = resolve_status_email(applicant.name, application.job.title, status)
        if email is None:
            logger.info(f"Application {application.id}: no template for status {status!r}, skipping notification")
            return False

        try:
            message_id = self.mail_client.send_message(
                sender=self.sender,
                recipient=applicant.email,
                subject=email.subject,
                text_body=email.text,
                html_body=email.html,
            )
        except Exception as e:
            # Delivery is best effort; the status change already succeeded
            logger.error(f"Failed to send status email for application {application.id} to {applicant.email}: {e}")
            return False

        logger.info(f"Status email sent for application {application.id} (message {message_id})")
        return True
