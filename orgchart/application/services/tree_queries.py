"""Read-only queries over a materialized hierarchy tree (stats, paths).

All traversals are iterative, so arbitrarily deep trees are safe.
"""

from __future__ import annotations

from collections.abc import Iterator

from orgchart.application.dtos.hierarchy import HierarchyNode, HierarchySummary


def iter_preorder(tree: HierarchyNode) -> Iterator[HierarchyNode]:
    """Yield nodes parent-first, siblings in stored (name ascending) order."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_nodes(tree: HierarchyNode) -> int:
    return sum(1 for _ in iter_preorder(tree))


def collect_departments(tree: HierarchyNode) -> set[str]:
    return {node.department for node in iter_preorder(tree)}


def max_depth(tree: HierarchyNode) -> int:
    """Edges on the longest root-to-leaf path (a lone root has depth 0)."""
    deepest = 0
    stack: list[tuple[HierarchyNode, int]] = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in node.children)
    return deepest


def summarize(tree: HierarchyNode) -> HierarchySummary:
    """Team size, department count, number of levels and average team size."""
    total = count_nodes(tree)
    departments = collect_departments(tree)
    return HierarchySummary(
        total_people=total,
        department_count=len(departments),
        levels=max_depth(tree) + 1,
        average_team_size=round(total / len(departments)),
    )


def find_path(tree: HierarchyNode, person_id: int) -> list[HierarchyNode] | None:
    """Nodes from the root down to person_id inclusive, or None if not in tree."""
    stack: list[tuple[HierarchyNode, list[HierarchyNode]]] = [(tree, [tree])]
    while stack:
        node, path = stack.pop()
        if node.id == person_id:
            return path
        stack.extend((child, path + [child]) for child in reversed(node.children))
    return None
