"""Ranked search over a materialized org-chart tree.

Matching is diacritic-insensitive and word-prefix based: every query word
must be a prefix of some word in the field ("jo" matches "John", "ohn"
does not). Scores:

    name equals query                         100
    name starts with query                     80
    every query word prefixes a name word      60 (+10 per exact word)
    job title matches (word prefix)           +30
    department matches (word prefix)          +20

Name tiers are exclusive; job title and department bonuses stack. Results
are sorted by score descending; equal scores keep pre-order traversal order.
Pure and synchronous: no I/O.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence

from orgchart.application.dtos.hierarchy import HierarchyNode, MatchedField, SearchResult
from orgchart.application.services.tree_queries import iter_preorder

EXACT_NAME_SCORE = 100
NAME_PREFIX_SCORE = 80
NAME_WORDS_SCORE = 60
EXACT_WORD_BONUS = 10
JOB_TITLE_SCORE = 30
DEPARTMENT_SCORE = 20


def normalize_text(text: str) -> str:
    """Lowercase and strip diacritics ("João" -> "joao")."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def tokenize(text: str | None) -> list[str]:
    """Normalized whitespace-separated words of text ([] for None or blank)."""
    if not text:
        return []
    return normalize_text(text).split()


def matches_words(query_words: Sequence[str], target: str | None) -> bool:
    """True if every query word is a prefix of at least one word of target."""
    target_words = tokenize(target)
    if not target_words:
        return False
    return all(
        any(word.startswith(query_word) for word in target_words)
        for query_word in query_words
    )


def _name_score(query_words: list[str], name: str | None) -> int:
    name_words = tokenize(name)
    if not name_words:
        return 0
    query_joined = " ".join(query_words)
    name_joined = " ".join(name_words)
    if name_joined == query_joined:
        return EXACT_NAME_SCORE
    if name_joined.startswith(query_joined):
        return NAME_PREFIX_SCORE
    if matches_words(query_words, name):
        exact_words = sum(1 for query_word in query_words if query_word in name_words)
        return NAME_WORDS_SCORE + EXACT_WORD_BONUS * exact_words
    return 0


def score_fields(
    query_words: list[str],
    name: str | None,
    job_title: str | None,
    department: str | None,
) -> int:
    """Relevance score of one person for already-tokenized query words."""
    score = _name_score(query_words, name)
    if matches_words(query_words, job_title):
        score += JOB_TITLE_SCORE
    if matches_words(query_words, department):
        score += DEPARTMENT_SCORE
    return score


def matched_fields(
    query_words: list[str],
    name: str | None,
    job_title: str | None,
    department: str | None,
) -> tuple[MatchedField, ...]:
    """Fields that satisfy the word-prefix rule, in the order name, jobTitle, department."""
    fields: list[MatchedField] = []
    if matches_words(query_words, name):
        fields.append("name")
    if matches_words(query_words, job_title):
        fields.append("jobTitle")
    if matches_words(query_words, department):
        fields.append("department")
    return tuple(fields)


def is_node_match(query: str, name: str, job_title: str, department: str) -> bool:
    """True if the person would appear in search results for query."""
    query_words = tokenize(query)
    if not query_words:
        return False
    return score_fields(query_words, name, job_title, department) > 0


def search_hierarchy(
    tree: HierarchyNode, query: str, limit: int | None = None
) -> list[SearchResult]:
    """Search every node of tree; return hits by score descending.

    Blank query returns []. Nodes scoring 0 are dropped. Sorting is stable,
    so ties stay in pre-order (parent before children, siblings by name).
    limit, when given, truncates after sorting.
    """
    query_words = tokenize(query)
    if not query_words:
        return []

    results: list[SearchResult] = []
    for node in iter_preorder(tree):
        score = score_fields(query_words, node.name, node.job_title, node.department)
        if score <= 0:
            continue
        results.append(
            SearchResult(
                id=node.id,
                name=node.name,
                job_title=node.job_title,
                department=node.department,
                photo_path=node.photo_path,
                score=score,
                matched_fields=matched_fields(
                    query_words, node.name, node.job_title, node.department
                ),
            )
        )

    results.sort(key=lambda r: r.score, reverse=True)
    if limit is not None:
        return results[:limit]
    return results
