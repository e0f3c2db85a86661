"""One client's pass through the onboarding form."""

from typing import Any

import structlog

from rabt.models.base import generate_ulid
from rabt.onboarding.draft import Draft
from rabt.onboarding.orchestrator import SubmissionOrchestrator
from rabt.onboarding.presenter import OutcomePresenter, StatusSignal, UiStatus
from rabt.onboarding.sequencer import StepSequencer
from rabt.repositories.onboarding import OnboardingSubmissionRepository
from rabt.services.notification_client import NotificationClient

logger = structlog.get_logger()

SERVICES_FIELD = "services"


class OnboardingSession:
    """Owns the draft, step state and submission state of one form instance.

    Sessions share nothing; create one per visitor or browser tab.
    """

    def __init__(
        self,
        store: OnboardingSubmissionRepository | None = None,
        notifier: NotificationClient | None = None,
        session_id: str | None = None,
    ):
        self.id = session_id or generate_ulid()
        self.draft = Draft()
        self.sequencer = StepSequencer()
        self.orchestrator = SubmissionOrchestrator(store=store, notifier=notifier)
        self.presenter = OutcomePresenter(self.draft, self.sequencer)
        self.status = StatusSignal.idle()
        self.step_errors: dict[str, str] = {}

    def set_field(self, name: str, value: Any) -> None:
        self.draft.set_field(name, value)

    def toggle_service(self, plan_id: str, included: bool) -> list[str]:
        """Select or deselect a marketing plan."""
        return self.draft.toggle_multi_value(SERVICES_FIELD, plan_id, included)

    def next(self) -> bool:
        """Advance past the current step if it validates.

        Returns:
            True if the step validated.
        """
        result = self.sequencer.advance(self.draft)
        self.step_errors = result.errors
        return result.valid

    def back(self) -> int:
        """Go to the previous step."""
        self.step_errors = {}
        return self.sequencer.retreat()

    def submit(self) -> StatusSignal:
        """Submit the draft from the final step.

        Returns:
            The status to display.

        Raises:
            ValueError: If the form is not on its final step.
        """
        if not self.sequencer.is_terminal:
            raise ValueError("Submission is only available from the final step")

        self.status = StatusSignal(status=UiStatus.SUBMITTING)
        outcome = self.orchestrator.submit(self.draft)
        self.status = self.presenter.present(outcome)
        self.step_errors = dict(self.status.errors)

        logger.debug(
            "Session submission finished",
            session_id=self.id,
            status=self.status.status.value,
        )

        return self.status
