"""Maps submission outcomes to the status shown on the form."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from rabt.onboarding.draft import Draft
from rabt.onboarding.orchestrator import FailureReason, OutcomeStatus, SubmissionOutcome
from rabt.onboarding.sequencer import StepSequencer

SUCCESS_TITLE = "Onboarding submitted successfully!"
SUCCESS_DESCRIPTION = "We received your details and will reach out shortly."
FAILURE_TITLE = "Submission failed"
FAILURE_DESCRIPTION = "Please try again or contact us directly."
INVALID_DESCRIPTION = "Please correct the highlighted fields and try again."


class UiStatus(str, Enum):
    """Form status shown to the user."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class StatusSignal:
    """What the form should display after a submission event."""

    status: UiStatus
    title: str = ""
    description: str = ""
    can_retry: bool = False
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def idle(cls) -> "StatusSignal":
        return cls(status=UiStatus.IDLE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "title": self.title,
            "description": self.description,
            "can_retry": self.can_retry,
            "errors": dict(self.errors),
        }


class OutcomePresenter:
    """Renders outcomes for one form session.

    A successful submission clears the draft and returns the sequencer to
    the first step so the form is ready for a new client.
    """

    def __init__(self, draft: Draft, sequencer: StepSequencer):
        self.draft = draft
        self.sequencer = sequencer

    def present(self, outcome: SubmissionOutcome) -> StatusSignal:
        """Map an outcome to a status signal.

        Args:
            outcome: The orchestrator's outcome.

        Returns:
            StatusSignal for the form.
        """
        if outcome.status == OutcomeStatus.IN_FLIGHT:
            return StatusSignal(status=UiStatus.SUBMITTING)

        if outcome.status == OutcomeStatus.SUCCEEDED:
            self.draft.clear()
            self.sequencer.reset()
            return StatusSignal(
                status=UiStatus.SUCCESS,
                title=SUCCESS_TITLE,
                description=SUCCESS_DESCRIPTION,
            )

        if outcome.status == OutcomeStatus.FAILED:
            if outcome.reason == FailureReason.VALIDATION and outcome.validation:
                return StatusSignal(
                    status=UiStatus.ERROR,
                    title=FAILURE_TITLE,
                    description=INVALID_DESCRIPTION,
                    can_retry=True,
                    errors=outcome.validation.errors,
                )
            return StatusSignal(
                status=UiStatus.ERROR,
                title=FAILURE_TITLE,
                description=FAILURE_DESCRIPTION,
                can_retry=True,
            )

        return StatusSignal.idle()
