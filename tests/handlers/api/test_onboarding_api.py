"""Tests for the public onboarding API handler."""

import json
from unittest.mock import patch

from rabt.repositories.onboarding import OnboardingSubmissionRepository
from rabt.utils.exceptions import PersistenceError


def _parse_body(response: dict) -> dict:
    """Parse JSON response body."""
    return json.loads(response["body"])


class TestCatalogRoutes:
    """Tests for read-only routes."""

    def test_list_plans(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        response = handler(api_gateway_event("GET", "/public/onboarding/plans"), lambda_context)

        assert response["statusCode"] == 200
        items = _parse_body(response)["items"]
        assert len(items) == 8
        assert items[3] == {
            "value": "social-media",
            "label": "Social Media Marketing",
            "price": "₹15,000 - ₹35,000/month",
        }

    def test_list_steps(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        response = handler(api_gateway_event("GET", "/public/onboarding/steps"), lambda_context)

        steps = _parse_body(response)["items"]
        assert [s["title"] for s in steps] == ["Brand", "Objectives", "Plan", "Contact"]
        assert [f["name"] for f in steps[3]["fields"]] == ["contactName", "email", "phone"]

    def test_options(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        response = handler(api_gateway_event("OPTIONS", "/public/onboarding/submit"), lambda_context)

        assert response["statusCode"] == 200
        assert response["body"] == ""
        assert "apikey" in response["headers"]["Access-Control-Allow-Headers"]

    def test_not_found(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        response = handler(api_gateway_event("GET", "/public/onboarding/other"), lambda_context)

        assert response["statusCode"] == 404


class TestValidateStep:
    """Tests for POST /public/onboarding/steps/{step}/validate."""

    def test_valid_step(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        event = api_gateway_event(
            "POST",
            "/public/onboarding/steps/0/validate",
            path_params={"step": "0"},
            body={"data": {"company": "Acme Co."}},
        )
        response = handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert _parse_body(response)["valid"] is True

    def test_invalid_step_fields(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        event = api_gateway_event(
            "POST",
            "/public/onboarding/steps/3/validate",
            path_params={"step": "3"},
            body={"data": {"contactName": "Jane Doe", "email": "jane@acme.com", "phone": "12345"}},
        )
        body = _parse_body(handler(event, lambda_context))

        assert body["valid"] is False
        phone = [r for r in body["results"] if r["field"] == "phone"][0]
        assert phone["message"] == "Enter valid 10-digit Indian mobile number"

    def test_unknown_step(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        event = api_gateway_event(
            "POST",
            "/public/onboarding/steps/9/validate",
            path_params={"step": "9"},
            body={"data": {}},
        )

        assert handler(event, lambda_context)["statusCode"] == 400

    def test_missing_data(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        event = api_gateway_event(
            "POST",
            "/public/onboarding/steps/0/validate",
            path_params={"step": "0"},
            body={"company": "Acme Co."},
        )
        response = handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert _parse_body(response)["error_code"] == "VALIDATION_ERROR"


class TestSubmit:
    """Tests for POST /public/onboarding/submit."""

    def test_submit_success(self, dynamodb_table, api_gateway_event, lambda_context, valid_form_data):
        from api.onboarding import handler

        with patch("rabt.services.notification_client.NotificationClient.notify") as notify:
            notify.return_value = {"success": True}
            event = api_gateway_event("POST", "/public/onboarding/submit", body={"data": valid_form_data})
            response = handler(event, lambda_context)

        assert response["statusCode"] == 201
        body = _parse_body(response)
        assert body["success"] is True
        assert body["title"] == "Onboarding submitted successfully!"

        stored = OnboardingSubmissionRepository().get_by_id(body["submission_id"])
        assert stored.company == "Acme Co."
        notify.assert_called_once()
        assert notify.call_args[0][0]["serviceLabels"] == ["Social Media Marketing"]

    def test_submit_success_without_notifier(
        self, dynamodb_table, api_gateway_event, lambda_context, valid_form_data
    ):
        """No notification endpoint configured still stores and succeeds."""
        from api.onboarding import handler

        event = api_gateway_event("POST", "/public/onboarding/submit", body={"data": valid_form_data})
        response = handler(event, lambda_context)

        assert response["statusCode"] == 201

    def test_submit_invalid(self, dynamodb_table, api_gateway_event, lambda_context, valid_form_data):
        from api.onboarding import handler

        event = api_gateway_event(
            "POST",
            "/public/onboarding/submit",
            body={"data": {**valid_form_data, "phone": "12345"}},
        )
        response = handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert _parse_body(response)["details"]["errors"] == [
            {"field": "phone", "message": "Enter valid 10-digit Indian mobile number"}
        ]
        items, _ = OnboardingSubmissionRepository().list_recent()
        assert items == []

    def test_submit_persistence_failure(self, api_gateway_event, lambda_context, valid_form_data):
        from api.onboarding import handler

        with patch.object(
            OnboardingSubmissionRepository,
            "insert_onboarding_record",
            side_effect=PersistenceError(original_error="timeout"),
        ), patch("rabt.services.notification_client.NotificationClient.notify") as notify:
            event = api_gateway_event("POST", "/public/onboarding/submit", body={"data": valid_form_data})
            response = handler(event, lambda_context)

        assert response["statusCode"] == 503
        body = _parse_body(response)
        assert body["message"] == "Please try again or contact us directly."
        assert body["details"] == {"title": "Submission failed", "can_retry": True}
        notify.assert_not_called()

    def test_submit_invalid_json(self, api_gateway_event, lambda_context):
        from api.onboarding import handler

        event = api_gateway_event("POST", "/public/onboarding/submit", body="{not json")

        assert handler(event, lambda_context)["statusCode"] == 400

    def test_submit_non_string_values(self, dynamodb_table, api_gateway_event, lambda_context, valid_form_data):
        """Wrongly typed values are reported per field and nothing is stored."""
        from api.onboarding import handler

        data = {**valid_form_data, "phone": 9876543210, "services": "social-media"}
        event = api_gateway_event("POST", "/public/onboarding/submit", body={"data": data})
        response = handler(event, lambda_context)

        assert response["statusCode"] == 400
        body = _parse_body(response)
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"]["errors"] == [
            {"field": "services", "message": "Please select at least one marketing plan"},
            {"field": "phone", "message": "Enter valid 10-digit Indian mobile number"},
        ]
        items, _ = OnboardingSubmissionRepository().list_recent()
        assert items == []
