"""Multi-step onboarding form: schema, navigation and submission."""

from rabt.onboarding.draft import Draft
from rabt.onboarding.orchestrator import (
    FailureReason,
    OutcomeStatus,
    SubmissionOrchestrator,
    SubmissionOutcome,
)
from rabt.onboarding.presenter import OutcomePresenter, StatusSignal, UiStatus
from rabt.onboarding.schema import (
    FIELD_SPECS,
    STEP_COUNT,
    FieldKind,
    FieldSpec,
    OnboardingStep,
    StepValidation,
    ValidationResult,
    fields_for_step,
    get_field_spec,
    validate_all,
    validate_field,
    validate_step,
)
from rabt.onboarding.sequencer import StepSequencer
from rabt.onboarding.session import OnboardingSession

__all__ = [
    # Schema
    "FIELD_SPECS",
    "STEP_COUNT",
    "FieldKind",
    "FieldSpec",
    "OnboardingStep",
    "StepValidation",
    "ValidationResult",
    "fields_for_step",
    "get_field_spec",
    "validate_all",
    "validate_field",
    "validate_step",
    # State
    "Draft",
    "StepSequencer",
    # Submission
    "FailureReason",
    "OutcomeStatus",
    "SubmissionOrchestrator",
    "SubmissionOutcome",
    "OutcomePresenter",
    "StatusSignal",
    "UiStatus",
    "OnboardingSession",
]
