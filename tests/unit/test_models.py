"""Tests for Pydantic models."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from rabt.models.base import generate_ulid
from rabt.models.marketing_plan import (
    MARKETING_PLANS,
    MarketingPlanId,
    get_marketing_plan,
    is_known_plan,
    plan_labels,
)
from rabt.models.onboarding import OnboardingEmailRequest, OnboardingSubmission


class TestBaseModel:
    """Tests for BaseModel."""

    def test_generate_ulid(self):
        """Test ULID generation."""
        ulid1 = generate_ulid()
        ulid2 = generate_ulid()

        assert len(ulid1) == 26
        assert ulid1 != ulid2


class TestMarketingPlans:
    """Tests for the marketing plan catalog."""

    def test_catalog_order(self):
        assert [plan.value for plan in MARKETING_PLANS] == [
            "brand-building",
            "digital-marketing",
            "full-management",
            "social-media",
            "content-creation",
            "influencer-marketing",
            "performance-marketing",
            "custom",
        ]

    def test_lookup(self):
        plan = get_marketing_plan("social-media")

        assert plan.label == "Social Media Marketing"
        assert plan.price == "₹15,000 - ₹35,000/month"

    def test_lookup_by_enum_value(self):
        assert get_marketing_plan(MarketingPlanId.CUSTOM.value).label == "Custom Package"

    def test_unknown(self):
        assert get_marketing_plan("billboards") is None
        assert is_known_plan("billboards") is False
        assert is_known_plan("full-management") is True

    def test_plan_labels_pass_unknown_through(self):
        assert plan_labels(["brand-building", "billboards"]) == [
            "Brand Building Package",
            "billboards",
        ]


class TestOnboardingSubmission:
    """Tests for the stored onboarding record."""

    def test_from_draft(self, valid_form_data):
        record = OnboardingSubmission.from_draft(valid_form_data)

        assert record.company == "Acme Co."
        assert record.website is None
        assert record.contact_name == "Jane Doe"
        assert record.phone == "9876543210"
        assert record.selected_services == ["social-media"]
        assert len(record.id) == 26

    def test_from_draft_keeps_website(self, valid_form_data):
        record = OnboardingSubmission.from_draft(
            {**valid_form_data, "website": "https://acme.com"}
        )

        assert record.website == "https://acme.com"

    def test_keys(self, valid_form_data):
        record = OnboardingSubmission.from_draft(valid_form_data)

        assert record.get_keys() == {"PK": f"ONBOARDING#{record.id}", "SK": "SUBMISSION"}
        gsi = record.get_gsi1_keys()
        assert gsi["GSI1PK"] == "ONBOARDING#SUBMISSIONS"
        assert gsi["GSI1SK"].endswith(f"#{record.id}")

    def test_dynamodb_round_trip(self, valid_form_data):
        record = OnboardingSubmission.from_draft(valid_form_data)

        item = record.to_dynamodb()
        assert "website" not in item
        assert isinstance(item["created_at"], str)

        item.update(record.get_keys())
        loaded = OnboardingSubmission.from_dynamodb(item)

        assert loaded.model_dump() == record.model_dump()

    def test_phone_not_parsed_as_date(self):
        """Only timestamp attributes are converted back to datetimes."""
        item = {
            "id": "sub-1",
            "company": "Acme Co.",
            "contact_name": "Jane Doe",
            "email": "jane@acme.com",
            "phone": "2024-01-01",
            "goals": "Grow Instagram reach",
            "selected_services": ["custom"],
            "budget": "10k",
            "timeline": "ASAP",
            "created_at": "2024-01-01T12:00:00+00:00",
            "updated_at": "2024-01-01T12:00:00Z",
            "version": Decimal("1"),
        }

        loaded = OnboardingSubmission.from_dynamodb(item)

        assert loaded.phone == "2024-01-01"
        assert loaded.updated_at == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_notification_payload(self, valid_form_data):
        record = OnboardingSubmission.from_draft(valid_form_data)

        payload = record.to_notification_payload()

        assert payload == {
            "submissionId": record.id,
            "company": "Acme Co.",
            "website": "",
            "contactName": "Jane Doe",
            "email": "jane@acme.com",
            "phone": "9876543210",
            "goals": "Grow Instagram reach and launch a campaign",
            "services": ["social-media"],
            "serviceLabels": ["Social Media Marketing"],
            "budget": "₹20,000–₹50,000",
            "timeline": "Start next month",
        }


class TestOnboardingEmailRequest:
    """Tests for the notification function's request body."""

    def test_form_field_names(self, valid_form_data):
        request = OnboardingEmailRequest.model_validate(valid_form_data)

        assert request.contact_name == "Jane Doe"
        assert request.services == ["social-media"]
        assert request.get_service_labels() == ["Social Media Marketing"]

    def test_record_field_names(self):
        request = OnboardingEmailRequest.model_validate(
            {
                "submission_id": "sub-1",
                "company": "Acme Co.",
                "contact_name": "Jane Doe",
                "email": "jane@acme.com",
                "goals": "Grow Instagram reach",
                "selected_services": ["custom"],
                "budget": "10k",
                "timeline": "ASAP",
            }
        )

        assert request.submission_id == "sub-1"
        assert request.services == ["custom"]
        assert request.phone is None

    def test_sent_labels_win(self, valid_form_data):
        request = OnboardingEmailRequest.model_validate(
            {**valid_form_data, "serviceLabels": ["Social"]}
        )

        assert request.get_service_labels() == ["Social"]

    def test_missing_required(self):
        with pytest.raises(PydanticValidationError):
            OnboardingEmailRequest.model_validate({"company": "Acme Co."})
