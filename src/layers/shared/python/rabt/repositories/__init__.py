"""Repository classes for DynamoDB data access."""

from rabt.repositories.base import BaseRepository
from rabt.repositories.onboarding import OnboardingSubmissionRepository

__all__ = [
    "BaseRepository",
    "OnboardingSubmissionRepository",
]
