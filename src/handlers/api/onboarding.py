"""Public onboarding API handler (no authentication required)."""

import json
from typing import Any

import structlog

from rabt.models.marketing_plan import MARKETING_PLANS
from rabt.onboarding.draft import Draft
from rabt.onboarding.orchestrator import FailureReason, OutcomeStatus, SubmissionOrchestrator
from rabt.onboarding.presenter import OutcomePresenter
from rabt.onboarding.schema import OnboardingStep, fields_for_step, validate_step
from rabt.onboarding.sequencer import StepSequencer
from rabt.utils.exceptions import ValidationError
from rabt.utils.responses import created, error, preflight, success, validation_error

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle public onboarding API requests.

    Routes:
        OPTIONS *                                       - CORS preflight
        GET  /public/onboarding/plans                   - Marketing plan catalog
        GET  /public/onboarding/steps                   - Steps and their fields
        POST /public/onboarding/steps/{step}/validate   - Validate one step
        POST /public/onboarding/submit                  - Submit a completed form
    """
    try:
        http_method = event.get("httpMethod", "").upper()
        path = event.get("path", "")
        path_params = event.get("pathParameters", {}) or {}

        if http_method == "OPTIONS":
            return preflight()

        if path.endswith("/public/onboarding/plans") and http_method == "GET":
            return list_plans()
        elif path.endswith("/validate") and http_method == "POST":
            return validate_form_step(path_params.get("step"), event)
        elif path.endswith("/public/onboarding/steps") and http_method == "GET":
            return list_steps()
        elif path.endswith("/public/onboarding/submit") and http_method == "POST":
            return submit_onboarding(event)
        else:
            return error("Not found", 404)

    except ValidationError as e:
        return validation_error(e.errors)
    except ValueError as e:
        return error(str(e), 400)
    except Exception as e:
        logger.exception("Onboarding handler error", error=str(e))
        return error("Internal server error", 500)


def _parse_form_data(event: dict) -> dict:
    """Extract the ``data`` object from the request body."""
    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        raise ValueError("Invalid JSON body")

    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, dict):
        raise ValidationError(errors=[{"field": "data", "message": "data must be an object"}])
    return data


def list_plans() -> dict:
    """List the marketing plans offered on the form."""
    return success({"items": [plan.model_dump(mode="json") for plan in MARKETING_PLANS]})


def list_steps() -> dict:
    """List the form steps with the fields each one owns."""
    steps = []
    for step in OnboardingStep:
        steps.append({
            "index": step.value,
            "title": step.title,
            "fields": [
                {
                    "name": spec.name,
                    "label": spec.label,
                    "kind": spec.kind.value,
                    "required": spec.required,
                }
                for spec in fields_for_step(step)
            ],
        })
    return success({"items": steps})


def validate_form_step(step: str | None, event: dict) -> dict:
    """Run the step gate for one step without changing any state."""
    try:
        step_index = int(step)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid step: {step}")

    if step_index not in {s.value for s in OnboardingStep}:
        raise ValueError(f"Invalid step: {step}")

    result = validate_step(step_index, _parse_form_data(event))
    return success(result.to_dict())


def submit_onboarding(event: dict) -> dict:
    """Validate, store and announce a completed onboarding form."""
    draft = Draft(_parse_form_data(event))
    orchestrator = SubmissionOrchestrator()
    presenter = OutcomePresenter(draft, StepSequencer())

    outcome = orchestrator.submit(draft)
    signal = presenter.present(outcome)

    if outcome.status == OutcomeStatus.SUCCEEDED:
        return created({
            **signal.to_dict(),
            "success": True,
            "submission_id": outcome.submission_id,
        })

    if outcome.reason == FailureReason.VALIDATION:
        return validation_error([
            {"field": name, "message": message}
            for name, message in signal.errors.items()
        ])

    return error(
        signal.description,
        503,
        error_code="PERSISTENCE_ERROR",
        details={"title": signal.title, "can_retry": signal.can_retry},
    )
