"""Submission pipeline for completed onboarding forms.

A submission is validated as a whole, stored, and then announced to the
notification function:

1. Validate every field. Invalid drafts never reach a collaborator.
2. Insert the onboarding record. If that fails the attempt fails and nothing
   is announced.
3. Notify. Failure is logged only; the stored record stands and the
   submission is reported as successful.

Persist and notify run one after the other, never concurrently. While an
attempt is in flight further submit calls are ignored.
"""

import copy
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

import structlog

from rabt.models.onboarding import OnboardingSubmission
from rabt.onboarding.schema import StepValidation, validate_all
from rabt.repositories.onboarding import OnboardingSubmissionRepository
from rabt.services.notification_client import NotificationClient
from rabt.utils.exceptions import NotificationError, PersistenceError

logger = structlog.get_logger()


class OutcomeStatus(str, Enum):
    """Lifecycle of a submission attempt."""

    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Why a submission attempt failed."""

    VALIDATION = "validation"
    PERSISTENCE = "persistence"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of the most recent submission attempt."""

    status: OutcomeStatus
    reason: FailureReason | None = None
    validation: StepValidation | None = None
    submission_id: str | None = None
    notified: bool = False

    @classmethod
    def idle(cls) -> "SubmissionOutcome":
        return cls(status=OutcomeStatus.IDLE)

    @classmethod
    def in_flight(cls) -> "SubmissionOutcome":
        return cls(status=OutcomeStatus.IN_FLIGHT)

    @classmethod
    def succeeded(cls, submission_id: str, notified: bool) -> "SubmissionOutcome":
        """Create a success outcome.

        Args:
            submission_id: ID of the stored record.
            notified: Whether the notification function accepted the payload.

        Returns:
            SubmissionOutcome instance.
        """
        return cls(
            status=OutcomeStatus.SUCCEEDED,
            submission_id=submission_id,
            notified=notified,
        )

    @classmethod
    def failed(
        cls,
        reason: FailureReason,
        validation: StepValidation | None = None,
    ) -> "SubmissionOutcome":
        """Create a failure outcome.

        Args:
            reason: Failure category.
            validation: Field results when the draft was invalid.

        Returns:
            SubmissionOutcome instance.
        """
        return cls(status=OutcomeStatus.FAILED, reason=reason, validation=validation)

    @property
    def is_in_flight(self) -> bool:
        return self.status == OutcomeStatus.IN_FLIGHT

    @property
    def is_success(self) -> bool:
        return self.status == OutcomeStatus.SUCCEEDED


class SubmissionOrchestrator:
    """Runs submission attempts for one form session."""

    def __init__(
        self,
        store: OnboardingSubmissionRepository | None = None,
        notifier: NotificationClient | None = None,
    ):
        """Initialize orchestrator.

        Args:
            store: Record store (created lazily if not provided).
            notifier: Notification client (created lazily if not provided).
        """
        self._store = store
        self._notifier = notifier
        self._lock = threading.Lock()
        self._outcome = SubmissionOutcome.idle()

    @property
    def store(self) -> OnboardingSubmissionRepository:
        """Get record store (lazy init)."""
        if self._store is None:
            self._store = OnboardingSubmissionRepository()
        return self._store

    @property
    def notifier(self) -> NotificationClient:
        """Get notification client (lazy init)."""
        if self._notifier is None:
            self._notifier = NotificationClient()
        return self._notifier

    @property
    def outcome(self) -> SubmissionOutcome:
        return self._outcome

    def submit(self, draft: Mapping[str, Any]) -> SubmissionOutcome:
        """Validate, store and announce a completed draft.

        The draft is copied once up front; the copy is what gets validated,
        stored and announced, so later edits to the draft do not leak into
        the attempt.

        Args:
            draft: Field values keyed by form field name.

        Returns:
            The attempt's outcome. A call made while another attempt is in
            flight returns the in-flight outcome and does nothing else.
        """
        with self._lock:
            if self._outcome.is_in_flight:
                logger.info("Duplicate submission ignored while in flight")
                return self._outcome

            values = copy.deepcopy(dict(draft))

            validation = validate_all(values)
            if not validation.valid:
                self._outcome = SubmissionOutcome.failed(FailureReason.VALIDATION, validation)
                logger.info(
                    "Submission rejected by validation",
                    invalid_fields=sorted(validation.errors),
                )
                return self._outcome

            self._outcome = SubmissionOutcome.in_flight()

        outcome = self._persist_and_notify(values)
        with self._lock:
            self._outcome = outcome
        return outcome

    def _persist_and_notify(self, values: dict[str, Any]) -> SubmissionOutcome:
        try:
            record = OnboardingSubmission.from_draft(values)
            stored = self.store.insert_onboarding_record(record)
        except PersistenceError as e:
            logger.error(
                "Onboarding record not stored",
                company=values.get("company"),
                error=e.message,
                details=e.details,
            )
            return SubmissionOutcome.failed(FailureReason.PERSISTENCE)
        except Exception as e:
            logger.exception(
                "Onboarding record not stored, unexpected error",
                company=values.get("company"),
                error=str(e),
            )
            return SubmissionOutcome.failed(FailureReason.PERSISTENCE)

        notified = self._notify(stored)

        logger.info(
            "Onboarding submitted",
            submission_id=stored.id,
            company=stored.company,
            services=stored.selected_services,
            notified=notified,
        )

        return SubmissionOutcome.succeeded(stored.id, notified)

    def _notify(self, record: OnboardingSubmission) -> bool:
        """Send the notification. Failures are logged and reported as False."""
        try:
            self.notifier.notify(record.to_notification_payload())
        except NotificationError as e:
            logger.warning(
                "Onboarding notification failed",
                submission_id=record.id,
                error=e.message,
                details=e.details,
            )
            return False
        except Exception as e:
            logger.exception(
                "Onboarding notification raised unexpectedly",
                submission_id=record.id,
                error=str(e),
            )
            return False
        return True
