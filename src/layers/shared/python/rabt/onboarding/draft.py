"""In-progress onboarding record accumulated across form steps."""

import copy
from collections.abc import Mapping
from typing import Any, Iterator


class Draft(Mapping):
    """Mutable field values keyed by field name.

    Values are kept regardless of which step is visible, so navigating back
    and forth never loses data. Keys that are not part of the form schema
    are stored as-is.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = {}
        if values:
            self.update(values)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Draft({self._values!r})"

    def set_field(self, name: str, value: Any) -> None:
        """Set a field value.

        Args:
            name: Field name.
            value: New value. Sequences are copied into a list.
        """
        if not name:
            raise ValueError("Field name is required")
        if isinstance(value, (list, tuple, set, frozenset)):
            value = list(value)
        self._values[name] = value

    def update(self, values: Mapping[str, Any]) -> None:
        """Set several fields at once."""
        for name, value in values.items():
            self.set_field(name, value)

    def toggle_multi_value(self, name: str, value: str, included: bool) -> list[str]:
        """Include or exclude one option of a multiselect field.

        Including an option twice keeps a single occurrence; excluding an
        absent option does nothing. Selection order is preserved.

        Args:
            name: Multiselect field name.
            value: Option value.
            included: Whether the option should be selected.

        Returns:
            The field's selection after the change.
        """
        current = self._values.get(name)
        if isinstance(current, (list, tuple, set, frozenset)):
            selection = list(current)
        elif current:
            selection = [current]
        else:
            selection = []

        if included and value not in selection:
            selection.append(value)
        elif not included:
            selection = [item for item in selection if item != value]

        self._values[name] = selection
        return list(selection)

    def snapshot(self) -> dict[str, Any]:
        """Get a deep copy of the current values."""
        return copy.deepcopy(self._values)

    def clear(self) -> None:
        """Discard all values."""
        self._values.clear()
