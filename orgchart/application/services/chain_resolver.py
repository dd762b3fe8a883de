"""Management chain resolution: walk manager pointers from a person up to the root."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from orgchart.application.dtos.person import PersonResult
from orgchart.application.interfaces.repositories import IPersonRepository
from orgchart.domain.exceptions import CycleDetectedException

logger = logging.getLogger(__name__)


class ChainResolver:
    """Resolves the ordered ancestor list of a person (nearest manager first).

    Read-only: one get_by_id per hop. Visited ids are tracked so a corrupted
    manager graph fails with CycleDetectedException instead of looping.
    """

    def __init__(self, person_repo: IPersonRepository) -> None:
        self.person_repo = person_repo

    async def resolve(self, person_id: int) -> list[PersonResult]:
        """Return the managers of person_id from immediate manager to root.

        The starting person is never included. Returns [] when the person
        does not exist. A manager id that no longer resolves truncates the
        chain at that point.

        Raises:
            CycleDetectedException: A manager pointer leads back to an id
                already on the chain (including a self-pointing record).
        """
        return [manager async for manager in self._iter_managers(person_id)]

    async def would_create_cycle(self, person_id: int, manager_id: int) -> bool:
        """Return True if making manager_id the manager of person_id closes a loop.

        Stops walking as soon as person_id shows up above manager_id, so an
        existing loop through person_id is reported as True, not raised.
        """
        if manager_id == person_id:
            return True
        async for ancestor in self._iter_managers(manager_id):
            if ancestor.id == person_id:
                return True
        return False

    async def _iter_managers(self, person_id: int) -> AsyncIterator[PersonResult]:
        start = await self.person_repo.get_by_id(person_id)
        if start is None:
            return

        walked = [person_id]
        visited = {person_id}
        manager_id = start.manager_id
        while manager_id is not None:
            walked.append(manager_id)
            if manager_id in visited:
                logger.warning(
                    "Management cycle detected from person %s: %s", person_id, walked
                )
                raise CycleDetectedException(person_id, walked)
            visited.add(manager_id)
            manager = await self.person_repo.get_by_id(manager_id)
            if manager is None:
                logger.debug(
                    "Chain for person %s truncated at missing manager %s",
                    person_id,
                    manager_id,
                )
                return
            yield manager
            manager_id = manager.manager_id
