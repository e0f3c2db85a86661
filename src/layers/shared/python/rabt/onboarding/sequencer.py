"""Step sequencer for the onboarding form.

Forward navigation is gated by the active step's validation; going back is
never validated. One sequencer per form session, not thread-safe.
"""

from typing import Any, Callable, Mapping

import structlog

from rabt.onboarding.schema import STEP_COUNT, OnboardingStep, StepValidation, validate_step

logger = structlog.get_logger()


class StepSequencer:
    """Tracks the visible step of one form session."""

    def __init__(
        self,
        step_count: int = STEP_COUNT,
        validator: Callable[[int, Mapping[str, Any]], StepValidation] = validate_step,
    ):
        """Initialize sequencer at the first step.

        Args:
            step_count: Number of steps.
            validator: Step validator, called with (step_index, draft).
        """
        if step_count < 1:
            raise ValueError("A form needs at least one step")
        self.step_count = step_count
        self._validator = validator
        self._index = 0

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_step(self) -> OnboardingStep:
        return OnboardingStep(self._index)

    @property
    def terminal_index(self) -> int:
        return self.step_count - 1

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_terminal(self) -> bool:
        """Whether the current step is the one submission starts from."""
        return self._index == self.terminal_index

    @property
    def progress(self) -> float:
        """Completion percentage shown by the progress bar."""
        return (self._index + 1) / self.step_count * 100

    def advance(self, draft: Mapping[str, Any]) -> StepValidation:
        """Move to the next step if the current step validates.

        On failure the index is unchanged and the results carry the per-field
        messages to display. On the terminal step a valid advance stays put.

        Args:
            draft: Current field values.

        Returns:
            Validation result of the current step.
        """
        result = self._validator(self._index, draft)
        if not result.valid:
            logger.debug(
                "Step gate rejected advance",
                step=self._index,
                invalid_fields=sorted(result.errors),
            )
            return result

        self._index = min(self._index + 1, self.terminal_index)
        return result

    def retreat(self) -> int:
        """Move to the previous step without validation.

        Returns:
            The new step index.
        """
        self._index = max(0, self._index - 1)
        return self._index

    def reset(self) -> None:
        """Return to the first step."""
        self._index = 0
