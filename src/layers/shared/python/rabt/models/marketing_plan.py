"""Marketing plan catalog.

The onboarding form, the stored record and the notification emails all refer
to plans by identifier. Labels and price ranges are resolved here only.
"""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field


class MarketingPlanId(str, Enum):
    """Marketing plan identifiers."""

    BRAND_BUILDING = "brand-building"
    DIGITAL_MARKETING = "digital-marketing"
    FULL_MANAGEMENT = "full-management"
    SOCIAL_MEDIA = "social-media"
    CONTENT_CREATION = "content-creation"
    INFLUENCER_MARKETING = "influencer-marketing"
    PERFORMANCE_MARKETING = "performance-marketing"
    CUSTOM = "custom"


class MarketingPlan(PydanticBaseModel):
    """A selectable marketing plan."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    value: MarketingPlanId = Field(..., description="Plan identifier")
    label: str = Field(..., description="Display label")
    price: str = Field(..., description="Monthly price range")


MARKETING_PLANS: tuple[MarketingPlan, ...] = (
    MarketingPlan(
        value=MarketingPlanId.BRAND_BUILDING,
        label="Brand Building Package",
        price="₹25,000 - ₹50,000/month",
    ),
    MarketingPlan(
        value=MarketingPlanId.DIGITAL_MARKETING,
        label="Digital Marketing Suite",
        price="₹35,000 - ₹75,000/month",
    ),
    MarketingPlan(
        value=MarketingPlanId.FULL_MANAGEMENT,
        label="Full Marketing Management",
        price="₹80,000 - ₹1,50,000/month",
    ),
    MarketingPlan(
        value=MarketingPlanId.SOCIAL_MEDIA,
        label="Social Media Marketing",
        price="₹15,000 - ₹35,000/month",
    ),
    MarketingPlan(
        value=MarketingPlanId.CONTENT_CREATION,
        label="Content Creation & Strategy",
        price="₹20,000 - ₹45,000/month",
    ),
    MarketingPlan(
        value=MarketingPlanId.INFLUENCER_MARKETING,
        label="Influencer Marketing",
        price="₹30,000 - ₹60,000/month",
    ),
    MarketingPlan(
        value=MarketingPlanId.PERFORMANCE_MARKETING,
        label="Performance Marketing",
        price="₹40,000 - ₹90,000/month",
    ),
    MarketingPlan(
        value=MarketingPlanId.CUSTOM,
        label="Custom Package",
        price="Let's discuss your needs",
    ),
)

_PLANS_BY_VALUE: dict[str, MarketingPlan] = {plan.value: plan for plan in MARKETING_PLANS}


def get_marketing_plan(value: str) -> MarketingPlan | None:
    """Look up a plan by identifier.

    Args:
        value: Plan identifier, e.g. "social-media".

    Returns:
        MarketingPlan or None if the identifier is not in the catalog.
    """
    return _PLANS_BY_VALUE.get(value)


def is_known_plan(value: str) -> bool:
    """Check whether an identifier belongs to the catalog."""
    return value in _PLANS_BY_VALUE


def plan_labels(values: Iterable[str]) -> list[str]:
    """Expand plan identifiers to display labels.

    Unknown identifiers are passed through unchanged so nothing is dropped
    from a notification.
    """
    labels = []
    for value in values:
        plan = _PLANS_BY_VALUE.get(value)
        labels.append(plan.label if plan else value)
    return labels
