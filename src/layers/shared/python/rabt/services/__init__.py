"""Service classes for business logic."""

from rabt.services.email_service import EmailError, EmailMessage, EmailService
from rabt.services.notification_client import NotificationClient
from rabt.services.onboarding_emails import (
    OnboardingMailer,
    compose_client_confirmation,
    compose_team_alert,
)

__all__ = [
    "EmailError",
    "EmailMessage",
    "EmailService",
    "NotificationClient",
    "OnboardingMailer",
    "compose_client_confirmation",
    "compose_team_alert",
]
