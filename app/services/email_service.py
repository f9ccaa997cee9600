"""
Mail delivery clients.

A single client is built at application startup (see main.lifespan) and
injected into request handlers; nothing in this module holds global state.

- SESEmailService: delivers through AWS SES
- ConsoleEmailService: logs messages instead of sending them (development)
"""

import logging
import uuid
from typing import Optional
import boto3
from botocore.exceptions import ClientError, BotoCoreError
from app.core.config import Settings

logger = logging.getLogger(__name__)


class MailDeliveryError(Exception):
    """Raised when a message could not be handed to the mail transport."""


class MailClient:
    """Interface shared by the mail delivery clients."""

    def send_message(
        self,
        sender: str,
        recipient: str,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> str:
        """
        Send one message.

        Returns:
            str: Delivery identifier assigned by the transport

        Raises:
            MailDeliveryError: If the transport rejected the message
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release transport resources."""


class SESEmailService(MailClient):
    """
    Service for sending emails via AWS SES.

    Supports both development (sandbox) and production modes.
    """

    def __init__(self, region_name: str, access_key_id: str = "", secret_access_key: str = "", client=None):
        """Initialize AWS SES client"""
        if client is not None:
            self.ses_client = client
            return

        session_kwargs = {'region_name': region_name}

        # Add credentials if provided (otherwise uses IAM role)
        if access_key_id and secret_access_key:
            session_kwargs['aws_access_key_id'] = access_key_id
            session_kwargs['aws_secret_access_key'] = secret_access_key

        self.ses_client = boto3.client('ses', **session_kwargs)

    def send_message(self, sender, recipient, subject, text_body, html_body=None):
        body = {'Text': {'Data': text_body, 'Charset': 'UTF-8'}}
        if html_body:
            body['Html'] = {'Data': html_body, 'Charset': 'UTF-8'}

        try:
            response = self.ses_client.send_email(
                Source=sender,
                Destination={'ToAddresses': [recipient]},
                Message={
                    'Subject': {'Data': subject, 'Charset': 'UTF-8'},
                    'Body': body,
                }
            )
        except ClientError as e:
            error_code = e.response['Error']['Code']
            error_message = e.response['Error']['Message']
            logger.error(f"AWS SES ClientError: {error_code} - {error_message}")

            if error_code == 'MessageRejected':
                logger.error(f"Email rejected: {error_message}")
            elif error_code == 'MailFromDomainNotVerified':
                logger.error("Sender email not verified in SES")

            raise MailDeliveryError(f"{error_code}: {error_message}") from e
        except BotoCoreError as e:
            logger.error(f"AWS BotoCoreError: {str(e)}")
            raise MailDeliveryError(str(e)) from e

        message_id = response.get('MessageId')
        logger.info(f"Email sent to {recipient} (MessageId: {message_id})")
        return message_id

    def close(self) -> None:
        self.ses_client.close()


class ConsoleEmailService(MailClient):
    """Logs outgoing mail instead of delivering it."""

    def send_message(self, sender, recipient, subject, text_body, html_body=None):
        message_id = f"console-{uuid.uuid4()}"
        logger.info(
            f"[console mail] {message_id} from={sender} to={recipient} subject={subject!r}\n{text_body}"
        )
        return message_id


def build_mail_client(settings: Settings) -> MailClient:
    """
    Build the mail client selected by MAIL_BACKEND.

    Raises:
        ValueError: If MAIL_BACKEND names an unknown backend
    """
    backend = settings.MAIL_BACKEND.lower()
    if backend == "ses":
        logger.info(f"Using AWS SES mail backend (region {settings.AWS_REGION})")
        return SESEmailService(
            region_name=settings.AWS_REGION,
            access_key_id=settings.AWS_ACCESS_KEY_ID,
            secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        )
    if backend == "console":
        logger.info("Using console mail backend; emails are logged, not sent")
        return ConsoleEmailService()
    raise ValueError(f"Unknown MAIL_BACKEND: {settings.MAIL_BACKEND}")


def format_sender(settings: Settings) -> str:
    """From header built from MAIL_FROM_NAME and MAIL_FROM_EMAIL."""
    if settings.MAIL_FROM_NAME:
        return f"{settings.MAIL_FROM_NAME} <{settings.MAIL_FROM_EMAIL}>"
    return settings.MAIL_FROM_EMAIL
