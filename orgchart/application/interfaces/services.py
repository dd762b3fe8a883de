"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import Any, Protocol


class PersonEventListener(Protocol):
    """Callback invoked after a person changes.

    event_name is one of person.created, person.updated, person.deleted,
    person.manager_changed, person.status_changed. Listeners are passed to
    PersonService explicitly; there is no global registry.
    """

    async def __call__(self, event_name: str, payload: dict[str, Any]) -> None:
        """Handle one person event."""
