"""Onboarding form field schema and validator.

Each field belongs to exactly one step. Validation is a pure function of the
field specs and the current draft; failures are returned as ValidationResult
data and never raised.
"""

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Mapping
from urllib.parse import urlparse

from rabt.models.marketing_plan import is_known_plan

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# 10-digit Indian mobile number
PHONE_REGEX = re.compile(r"^[6-9]\d{9}$")


class FieldKind(str, Enum):
    """Form field kinds."""

    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"
    LONGTEXT = "longtext"
    MULTISELECT = "multiselect"


class OnboardingStep(IntEnum):
    """Form steps in display order."""

    BRAND = 0
    OBJECTIVES = 1
    PLAN = 2
    CONTACT = 3

    @property
    def title(self) -> str:
        return self.name.title()


STEP_COUNT = len(OnboardingStep)


@dataclass(frozen=True)
class FieldSpec:
    """Static definition of one form field."""

    name: str
    label: str
    kind: FieldKind
    owning_step: OnboardingStep
    message: str
    required: bool = True
    min_length: int = 1


@dataclass(frozen=True)
class ValidationResult:
    """Validation result for one field."""

    field_name: str
    valid: bool
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field_name, "valid": self.valid, "message": self.message}


@dataclass(frozen=True)
class StepValidation:
    """Combined validation result for a set of fields."""

    valid: bool
    results: tuple[ValidationResult, ...]

    @property
    def errors(self) -> dict[str, str]:
        """Messages for the invalid fields, keyed by field name."""
        return {r.field_name: r.message for r in self.results if not r.valid}

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "results": [r.to_dict() for r in self.results],
        }


FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec(
        name="company",
        label="Company / Brand",
        kind=FieldKind.TEXT,
        owning_step=OnboardingStep.BRAND,
        message="Company name is required",
        min_length=2,
    ),
    FieldSpec(
        name="website",
        label="Website",
        kind=FieldKind.URL,
        owning_step=OnboardingStep.BRAND,
        message="Provide a valid URL",
        required=False,
    ),
    FieldSpec(
        name="goals",
        label="Main goals",
        kind=FieldKind.LONGTEXT,
        owning_step=OnboardingStep.OBJECTIVES,
        message="Tell us a bit more about your goals",
        min_length=10,
    ),
    FieldSpec(
        name="services",
        label="Marketing Plans",
        kind=FieldKind.MULTISELECT,
        owning_step=OnboardingStep.OBJECTIVES,
        message="Please select at least one marketing plan",
    ),
    FieldSpec(
        name="budget",
        label="Monthly budget (range)",
        kind=FieldKind.TEXT,
        owning_step=OnboardingStep.PLAN,
        message="Budget is required",
    ),
    FieldSpec(
        name="timeline",
        label="Timeline",
        kind=FieldKind.TEXT,
        owning_step=OnboardingStep.PLAN,
        message="Timeline is required",
    ),
    FieldSpec(
        name="contactName",
        label="Your name",
        kind=FieldKind.TEXT,
        owning_step=OnboardingStep.CONTACT,
        message="Your name is required",
        min_length=2,
    ),
    FieldSpec(
        name="email",
        label="Email",
        kind=FieldKind.EMAIL,
        owning_step=OnboardingStep.CONTACT,
        message="Valid email required",
    ),
    FieldSpec(
        name="phone",
        label="Phone",
        kind=FieldKind.PHONE,
        owning_step=OnboardingStep.CONTACT,
        message="Enter valid 10-digit Indian mobile number",
    ),
)

_SPECS_BY_NAME = {spec.name: spec for spec in FIELD_SPECS}


def get_field_spec(name: str) -> FieldSpec | None:
    """Look up a field spec by field name."""
    return _SPECS_BY_NAME.get(name)


def fields_for_step(step_index: int) -> tuple[FieldSpec, ...]:
    """Get the fields owned by a step.

    Raises:
        ValueError: If the step index is out of range.
    """
    step = OnboardingStep(step_index)
    return tuple(spec for spec in FIELD_SPECS if spec.owning_step == step)


def _is_absolute_url(value: str) -> bool:
    if any(ch.isspace() for ch in value):
        return False
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == ()


def validate_field(spec: FieldSpec, draft: Mapping[str, Any]) -> ValidationResult:
    """Validate one field against the draft.

    Multiselect values must be a list of strings and every other kind a
    string; any other shape is invalid rather than coerced.

    Args:
        spec: Field definition.
        draft: Current field values keyed by field name.

    Returns:
        ValidationResult for the field.
    """
    value = draft.get(spec.name)

    def invalid(message: str = spec.message) -> ValidationResult:
        return ValidationResult(field_name=spec.name, valid=False, message=message)

    if _is_blank(value):
        return invalid() if spec.required else ValidationResult(spec.name, True)

    if spec.kind == FieldKind.MULTISELECT:
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            return invalid()
        for item in value:
            if not is_known_plan(item):
                return invalid(f"Unknown marketing plan: {item}")
        return ValidationResult(spec.name, True)

    if not isinstance(value, str):
        return invalid()

    if len(value) < spec.min_length:
        return invalid()

    if spec.kind == FieldKind.EMAIL and not EMAIL_REGEX.match(value):
        return invalid()
    if spec.kind == FieldKind.PHONE and not PHONE_REGEX.match(value):
        return invalid()
    if spec.kind == FieldKind.URL and not _is_absolute_url(value):
        return invalid()

    return ValidationResult(spec.name, True)


def _validate_specs(specs: tuple[FieldSpec, ...], draft: Mapping[str, Any]) -> StepValidation:
    results = tuple(validate_field(spec, draft) for spec in specs)
    return StepValidation(valid=all(r.valid for r in results), results=results)


def validate_step(step_index: int, draft: Mapping[str, Any]) -> StepValidation:
    """Validate the fields owned by one step.

    Raises:
        ValueError: If the step index is out of range.
    """
    return _validate_specs(fields_for_step(step_index), draft)


def validate_all(draft: Mapping[str, Any]) -> StepValidation:
    """Validate every field of the form."""
    return _validate_specs(FIELD_SPECS, draft)
