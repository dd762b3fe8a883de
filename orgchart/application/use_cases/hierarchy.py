"""Hierarchy use cases: org-chart tree, management chain, hierarchy search."""

from __future__ import annotations

import logging

from orgchart.application.dtos.hierarchy import (
    HierarchyNode,
    HierarchySummary,
    SearchResult,
)
from orgchart.application.dtos.person import PersonResult
from orgchart.application.interfaces.repositories import IPersonRepository
from orgchart.application.services.chain_resolver import ChainResolver
from orgchart.application.services.hierarchy_search import search_hierarchy
from orgchart.application.services.tree_builder import TreeBuilder
from orgchart.application.services import tree_queries
from orgchart.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class HierarchyService:
    """Read-only org-chart operations over the person store.

    Every call is a pure function of its inputs and the store content at
    call time; nothing is cached between calls.
    """

    def __init__(
        self,
        person_repo: IPersonRepository,
        tree_builder: TreeBuilder | None = None,
        chain_resolver: ChainResolver | None = None,
    ) -> None:
        self.person_repo = person_repo
        self.tree_builder = tree_builder or TreeBuilder(person_repo)
        self.chain_resolver = chain_resolver or ChainResolver(person_repo)

    async def get_hierarchy(self, root_id: int | None = None) -> HierarchyNode:
        """Return the org chart rooted at root_id (or the root person).

        Raises ResourceNotFoundException when no root can be resolved.
        """
        return await self.tree_builder.build(root_id)

    async def get_management_chain(self, person_id: int) -> list[PersonResult]:
        """Return managers of person_id, nearest first; raise if the person does not exist."""
        if not await self.person_repo.exists(person_id):
            raise ResourceNotFoundException("Person", person_id)
        return await self.chain_resolver.resolve(person_id)

    async def search(
        self,
        query: str,
        root_id: int | None = None,
        limit: int | None = None,
    ) -> list[SearchResult]:
        """Build the tree then rank its people against query.

        A blank query returns [] without touching the store.
        """
        if not query.strip():
            return []
        tree = await self.get_hierarchy(root_id)
        results = self.search_tree(tree, query, limit)
        logger.debug("Hierarchy search %r matched %s people", query, len(results))
        return results

    @staticmethod
    def search_tree(
        tree: HierarchyNode, query: str, limit: int | None = None
    ) -> list[SearchResult]:
        """Rank people of an already-built tree against query (no I/O)."""
        return search_hierarchy(tree, query, limit)

    async def get_summary(self, root_id: int | None = None) -> HierarchySummary:
        """Return size and shape statistics of the org chart."""
        tree = await self.get_hierarchy(root_id)
        return tree_queries.summarize(tree)

    async def get_path(
        self, person_id: int, root_id: int | None = None
    ) -> list[HierarchyNode]:
        """Return the root-to-person breadcrumb; raise if the person is not in the tree."""
        tree = await self.get_hierarchy(root_id)
        path = tree_queries.find_path(tree, person_id)
        if path is None:
            raise ResourceNotFoundException("Person", person_id)
        return path
