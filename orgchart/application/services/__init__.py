"""Application services: hierarchy core (chain, tree, search, tree queries)."""

from orgchart.application.services.chain_resolver import ChainResolver
from orgchart.application.services.hierarchy_search import (
    is_node_match,
    normalize_text,
    search_hierarchy,
)
from orgchart.application.services.tree_builder import TreeBuilder

__all__ = [
    "ChainResolver",
    "TreeBuilder",
    "is_node_match",
    "normalize_text",
    "search_hierarchy",
]
