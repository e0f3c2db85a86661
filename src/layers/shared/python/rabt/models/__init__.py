"""Pydantic models for RABT onboarding entities."""

from rabt.models.base import BaseModel, TimestampMixin
from rabt.models.marketing_plan import (
    MARKETING_PLANS,
    MarketingPlan,
    MarketingPlanId,
    get_marketing_plan,
    is_known_plan,
    plan_labels,
)
from rabt.models.onboarding import OnboardingEmailRequest, OnboardingSubmission

__all__ = [
    # Base
    "BaseModel",
    "TimestampMixin",
    # Marketing plans
    "MARKETING_PLANS",
    "MarketingPlan",
    "MarketingPlanId",
    "get_marketing_plan",
    "is_known_plan",
    "plan_labels",
    # Onboarding
    "OnboardingEmailRequest",
    "OnboardingSubmission",
]
