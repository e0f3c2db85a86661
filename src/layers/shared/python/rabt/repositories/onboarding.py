"""Onboarding submission repository for DynamoDB operations."""

import structlog
from botocore.exceptions import BotoCoreError, ClientError

from rabt.models.onboarding import OnboardingSubmission
from rabt.repositories.base import BaseRepository
from rabt.utils.exceptions import ConflictError, PersistenceError

logger = structlog.get_logger()


class OnboardingSubmissionRepository(BaseRepository[OnboardingSubmission]):
    """Repository for OnboardingSubmission entities."""

    def __init__(self, table_name: str | None = None):
        """Initialize onboarding submission repository."""
        super().__init__(OnboardingSubmission, table_name)

    def get_by_id(self, submission_id: str) -> OnboardingSubmission | None:
        """Get a submission by ID.

        Args:
            submission_id: The submission ID.

        Returns:
            OnboardingSubmission or None if not found.
        """
        return self.get(pk=f"ONBOARDING#{submission_id}", sk="SUBMISSION")

    def insert_onboarding_record(self, record: OnboardingSubmission) -> OnboardingSubmission:
        """Durably store a new onboarding record.

        Args:
            record: The record to insert.

        Returns:
            The stored record.

        Raises:
            PersistenceError: If the record was not stored for any reason,
                including timeouts and an ID collision.
        """
        try:
            return self.create(record, gsi_keys=record.get_gsi1_keys())
        except ConflictError as e:
            raise PersistenceError(original_error=e.message) from e
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Onboarding record insert failed",
                submission_id=record.id,
                error=str(e),
            )
            raise PersistenceError(original_error=str(e)) from e

    def list_recent(
        self,
        limit: int = 50,
        last_key: dict | None = None,
    ) -> tuple[list[OnboardingSubmission], dict | None]:
        """List submissions newest first using GSI1.

        Args:
            limit: Maximum submissions to return.
            last_key: Pagination cursor.

        Returns:
            Tuple of (submissions, next_page_key).
        """
        return self.query(
            pk="ONBOARDING#SUBMISSIONS",
            index_name="GSI1",
            limit=limit,
            last_key=last_key,
            scan_forward=False,  # Most recent first
        )
