"""Transactional emails sent when a client completes onboarding."""

import html
import os

import structlog

from rabt.models.marketing_plan import get_marketing_plan
from rabt.models.onboarding import OnboardingEmailRequest
from rabt.services.email_service import EmailMessage, EmailService

logger = structlog.get_logger()

AGENCY_NAME = "RABT Marketing"


def _plan_lines(request: OnboardingEmailRequest) -> list[str]:
    """One line per selected plan, with its price range when known."""
    lines = []
    labels = request.get_service_labels()
    for index, value in enumerate(request.services):
        plan = get_marketing_plan(value)
        label = labels[index] if index < len(labels) else value
        lines.append(f"{label} ({plan.price})" if plan else label)
    return lines


def _html_list(items: list[str]) -> str:
    return "".join(f"<li>{html.escape(item)}</li>" for item in items)


def compose_client_confirmation(request: OnboardingEmailRequest) -> EmailMessage:
    """Compose the confirmation sent to the client."""
    plans = _plan_lines(request)

    body_text = "\n".join([
        f"Hi {request.contact_name},",
        "",
        f"Thank you for choosing {AGENCY_NAME}. We received the onboarding details "
        f"for {request.company} and our team will reach out shortly.",
        "",
        "Plans you are interested in:",
        *[f"- {line}" for line in plans],
        "",
        f"Budget: {request.budget}",
        f"Timeline: {request.timeline}",
        "",
        f"The {AGENCY_NAME} team",
    ])

    body_html = (
        f"<p>Hi {html.escape(request.contact_name)},</p>"
        f"<p>Thank you for choosing {AGENCY_NAME}. We received the onboarding details "
        f"for <strong>{html.escape(request.company)}</strong> and our team will reach out shortly.</p>"
        f"<p>Plans you are interested in:</p><ul>{_html_list(plans)}</ul>"
        f"<p>Budget: {html.escape(request.budget)}<br>Timeline: {html.escape(request.timeline)}</p>"
        f"<p>The {AGENCY_NAME} team</p>"
    )

    return EmailMessage(
        subject=f"Welcome to {AGENCY_NAME}, {request.company}!",
        body_text=body_text,
        body_html=body_html,
    )


def compose_team_alert(request: OnboardingEmailRequest) -> EmailMessage:
    """Compose the internal alert sent to the agency team."""
    rows = [
        ("Company", request.company),
        ("Website", request.website or "-"),
        ("Contact", request.contact_name),
        ("Email", request.email),
        ("Phone", request.phone or "-"),
        ("Goals", request.goals),
        ("Plans", ", ".join(_plan_lines(request)) or "-"),
        ("Budget", request.budget),
        ("Timeline", request.timeline),
    ]
    if request.submission_id:
        rows.append(("Submission", request.submission_id))

    body_text = "\n".join(f"{name}: {value}" for name, value in rows)
    body_html = "<table>" + "".join(
        f"<tr><th align='left'>{name}</th><td>{html.escape(value)}</td></tr>"
        for name, value in rows
    ) + "</table>"

    return EmailMessage(
        subject=f"New client onboarding: {request.company}",
        body_text=body_text,
        body_html=body_html,
    )


class OnboardingMailer:
    """Sends the client confirmation and the team alert."""

    def __init__(
        self,
        email_service: EmailService | None = None,
        team_email: str | None = None,
    ):
        """Initialize mailer.

        Args:
            email_service: EmailService carrying the sender address (created
                from the environment if not provided).
            team_email: Team alert recipient. Falls back to ONBOARDING_TEAM_EMAIL env var.
        """
        self.email_service = email_service or EmailService()
        self.team_email = team_email or os.environ.get("ONBOARDING_TEAM_EMAIL")

    def send(self, request: OnboardingEmailRequest) -> list[str]:
        """Send the onboarding emails.

        Args:
            request: The onboarding data.

        Returns:
            SES message IDs, one per email sent. Empty when no sender is configured.

        Raises:
            EmailError: If SES rejects a message.
        """
        if not self.email_service.is_configured:
            logger.info("Onboarding email delivery not configured, skipping", company=request.company)
            return []

        sent = [
            self.email_service.send(
                compose_client_confirmation(request),
                to=request.email,
                email_type="onboarding_confirmation",
            )
        ]

        if self.team_email:
            sent.append(
                self.email_service.send(
                    compose_team_alert(request),
                    to=self.team_email,
                    email_type="onboarding_team_alert",
                    reply_to=request.email,
                )
            )

        return sent
