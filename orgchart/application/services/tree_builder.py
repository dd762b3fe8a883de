"""Org-chart tree materialization from the manager_id parent-pointer relation."""

from __future__ import annotations

import logging

from orgchart.application.dtos.hierarchy import HierarchyNode
from orgchart.application.dtos.person import PersonResult
from orgchart.application.services.hierarchy_search import normalize_text
from orgchart.application.interfaces.repositories import IPersonRepository
from orgchart.domain.exceptions import (
    CycleDetectedException,
    HierarchyLimitExceededException,
    ResourceNotFoundException,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_NODES = 10_000


def sibling_key(person: PersonResult) -> tuple[str, str, int]:
    """Sort key for direct reports: name ignoring case and accents, then raw name, then id.

    "Ágata Reis" and "de Souza" sort before "Zara Lima".
    """
    return (normalize_text(person.name), person.name, person.id)


class TreeBuilder:
    """Builds a HierarchyNode tree rooted at a person or at the discovered root.

    Traversal uses an explicit work stack, so org depth never touches the
    interpreter recursion limit. One find_direct_reports query per node,
    issued sequentially: the request session does not allow concurrent
    queries. Cancelling the awaiting task stops further store calls.
    """

    def __init__(
        self,
        person_repo: IPersonRepository,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_nodes: int = DEFAULT_MAX_NODES,
    ) -> None:
        self.person_repo = person_repo
        self.max_depth = max_depth
        self.max_nodes = max_nodes

    async def build(self, root_id: int | None = None) -> HierarchyNode:
        """Return the tree rooted at root_id, or at the person with no manager.

        Children at every level are ordered by sibling_key.

        Raises:
            ResourceNotFoundException: root_id does not exist, or no root
                person exists when root_id is omitted.
            CycleDetectedException: A person is reached twice (manager loop).
            HierarchyLimitExceededException: Depth or node count cap exceeded.
        """
        root = await self._resolve_root(root_id)
        root_node = HierarchyNode.from_person(root)

        parent_of: dict[int, int | None] = {root.id: None}
        node_count = 1
        # (node, depth) pairs still waiting for their direct reports
        stack: list[tuple[HierarchyNode, int]] = [(root_node, 0)]
        while stack:
            node, depth = stack.pop()
            reports = await self.person_repo.find_direct_reports(node.id)
            if not reports:
                continue
            if depth + 1 > self.max_depth:
                logger.warning(
                    "Hierarchy rooted at %s exceeds max_depth=%s", root.id, self.max_depth
                )
                raise HierarchyLimitExceededException("max_depth", self.max_depth, root.id)

            for report in sorted(reports, key=sibling_key):
                if report.id in parent_of:
                    path = self._path_to(node.id, parent_of) + [report.id]
                    logger.warning(
                        "Management cycle detected in hierarchy rooted at %s: %s",
                        root.id,
                        path,
                    )
                    raise CycleDetectedException(root.id, path)
                node_count += 1
                if node_count > self.max_nodes:
                    logger.warning(
                        "Hierarchy rooted at %s exceeds max_nodes=%s", root.id, self.max_nodes
                    )
                    raise HierarchyLimitExceededException(
                        "max_nodes", self.max_nodes, root.id
                    )
                parent_of[report.id] = node.id
                child = HierarchyNode.from_person(report)
                node.children.append(child)
                stack.append((child, depth + 1))

        logger.debug("Built hierarchy rooted at %s with %s nodes", root.id, node_count)
        return root_node

    async def _resolve_root(self, root_id: int | None) -> PersonResult:
        if root_id is None:
            root = await self.person_repo.find_root_person()
            if root is None:
                raise ResourceNotFoundException("Root person")
            return root
        root = await self.person_repo.get_by_id(root_id)
        if root is None:
            raise ResourceNotFoundException("Person", root_id)
        return root

    @staticmethod
    def _path_to(person_id: int, parent_of: dict[int, int | None]) -> list[int]:
        """Ids from the root down to person_id, following recorded parents."""
        path: list[int] = []
        current: int | None = person_id
        while current is not None:
            path.append(current)
            current = parent_of[current]
        path.reverse()
        return path
