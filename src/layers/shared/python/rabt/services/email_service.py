"""Amazon SES delivery for the onboarding emails."""

import os
from dataclasses import dataclass
from typing import Any

import boto3
import structlog
from botocore.exceptions import ClientError

logger = structlog.get_logger()


class EmailError(Exception):
    """Raised when SES does not accept a message."""

    def __init__(self, message: str, code: str | None = None, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


@dataclass(frozen=True)
class EmailMessage:
    """A composed email: subject plus text and HTML bodies."""

    subject: str
    body_text: str
    body_html: str

    def to_ses(self) -> dict[str, Any]:
        """SES ``Message`` structure for this email."""
        return {
            "Subject": {"Data": self.subject, "Charset": "UTF-8"},
            "Body": {
                "Text": {"Data": self.body_text, "Charset": "UTF-8"},
                "Html": {"Data": self.body_html, "Charset": "UTF-8"},
            },
        }


class EmailService:
    """Sends composed onboarding emails from one sender address."""

    def __init__(
        self,
        from_email: str | None = None,
        region_name: str | None = None,
        configuration_set: str | None = None,
    ):
        """Initialize Email service.

        Args:
            from_email: Sender address. Falls back to SES_FROM_EMAIL env var.
            region_name: AWS region for SES. Falls back to AWS_REGION env var.
            configuration_set: SES configuration set. Falls back to SES_CONFIGURATION_SET.
        """
        self.from_email = from_email or os.environ.get("SES_FROM_EMAIL")
        self.region_name = region_name or os.environ.get("AWS_REGION", "us-east-1")
        self.configuration_set = configuration_set or os.environ.get("SES_CONFIGURATION_SET")
        self._client = None

    @property
    def client(self):
        """Get SES client (lazy initialization)."""
        if self._client is None:
            self._client = boto3.client("ses", region_name=self.region_name)
        return self._client

    @property
    def is_configured(self) -> bool:
        return bool(self.from_email)

    def send(
        self,
        message: EmailMessage,
        to: str,
        email_type: str,
        reply_to: str | None = None,
    ) -> str:
        """Send one message to one recipient.

        Args:
            message: Composed email.
            to: Recipient address.
            email_type: Value of the ``email_type`` message tag.
            reply_to: Optional reply-to address.

        Returns:
            SES message ID.

        Raises:
            EmailError: If no sender is configured or SES rejects the message.
        """
        if not self.from_email:
            raise EmailError("Sender email address is required", code="SENDER_MISSING")

        kwargs: dict[str, Any] = {
            "Source": self.from_email,
            "Destination": {"ToAddresses": [to]},
            "Message": message.to_ses(),
            "Tags": [{"Name": "email_type", "Value": email_type}],
        }
        if reply_to:
            kwargs["ReplyToAddresses"] = [reply_to]
        if self.configuration_set:
            kwargs["ConfigurationSetName"] = self.configuration_set

        try:
            response = self.client.send_email(**kwargs)
        except ClientError as e:
            error = e.response["Error"]
            logger.error(
                "SES send failed",
                email_type=email_type,
                error_code=error["Code"],
                error_message=error["Message"],
            )
            raise EmailError(
                f"Failed to send email: {error['Message']}",
                code=error["Code"],
                details={"aws_error": error["Message"]},
            ) from e

        logger.info("Email sent", email_type=email_type, message_id=response["MessageId"])
        return response["MessageId"]
