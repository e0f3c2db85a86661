"""Onboarding submission models."""

from typing import Any, ClassVar, Mapping

from pydantic import AliasChoices, BaseModel as PydanticBaseModel, ConfigDict, Field

from rabt.models.base import BaseModel
from rabt.models.marketing_plan import plan_labels


class OnboardingSubmission(BaseModel):
    """A stored client onboarding record.

    Key Pattern:
        PK: ONBOARDING#{id}
        SK: SUBMISSION
        GSI1PK: ONBOARDING#SUBMISSIONS
        GSI1SK: {created_at}#{id}
    """

    _pk_prefix: ClassVar[str] = "ONBOARDING#"
    _sk_prefix: ClassVar[str] = "SUBMISSION"

    company: str = Field(..., description="Company or brand name")
    website: str | None = Field(None, description="Company website")
    contact_name: str = Field(..., description="Contact person")
    email: str = Field(..., description="Contact email")
    phone: str = Field(..., description="Contact mobile number")
    goals: str = Field(..., description="Main marketing goals")
    selected_services: list[str] = Field(
        default_factory=list, description="Selected marketing plan identifiers"
    )
    budget: str = Field(..., description="Monthly budget range")
    timeline: str = Field(..., description="Desired start timeline")

    def get_pk(self) -> str:
        """Get partition key: ONBOARDING#{id}."""
        return f"ONBOARDING#{self.id}"

    def get_sk(self) -> str:
        """Get sort key: SUBMISSION."""
        return "SUBMISSION"

    def get_gsi1_keys(self) -> dict[str, str]:
        """Get GSI1 keys for listing submissions newest first."""
        return {
            "GSI1PK": "ONBOARDING#SUBMISSIONS",
            "GSI1SK": f"{self.created_at.isoformat()}#{self.id}",
        }

    @classmethod
    def from_draft(cls, draft: Mapping[str, Any]) -> "OnboardingSubmission":
        """Build a record from form values keyed by form field name.

        An empty website is stored as absent.
        """
        return cls(
            company=draft.get("company", ""),
            website=draft.get("website") or None,
            contact_name=draft.get("contactName", ""),
            email=draft.get("email", ""),
            phone=draft.get("phone", ""),
            goals=draft.get("goals", ""),
            selected_services=list(draft.get("services") or []),
            budget=draft.get("budget", ""),
            timeline=draft.get("timeline", ""),
        )

    def to_notification_payload(self) -> dict[str, Any]:
        """Build the JSON body sent to the notification function.

        Uses the form's field names, with plan identifiers under ``services``
        and their display labels under ``serviceLabels``.
        """
        return {
            "submissionId": self.id,
            "company": self.company,
            "website": self.website or "",
            "contactName": self.contact_name,
            "email": self.email,
            "phone": self.phone,
            "goals": self.goals,
            "services": list(self.selected_services),
            "serviceLabels": plan_labels(self.selected_services),
            "budget": self.budget,
            "timeline": self.timeline,
        }


class OnboardingEmailRequest(PydanticBaseModel):
    """Body accepted by the send-onboarding-email function.

    Accepts both the form's field names and the stored record's names.
    """

    model_config = ConfigDict(populate_by_name=True)

    submission_id: str | None = Field(
        None, validation_alias=AliasChoices("submissionId", "submission_id")
    )
    company: str
    website: str | None = None
    contact_name: str = Field(..., validation_alias=AliasChoices("contactName", "contact_name"))
    email: str
    phone: str | None = None
    goals: str
    services: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("services", "selected_services")
    )
    service_labels: list[str] | None = Field(
        None, validation_alias=AliasChoices("serviceLabels", "service_labels")
    )
    budget: str
    timeline: str

    def get_service_labels(self) -> list[str]:
        """Labels for the selected plans, resolved from the catalog if not sent."""
        if self.service_labels:
            return self.service_labels
        return plan_labels(self.services)
