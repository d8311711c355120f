"""
Case-insensitive term matching for reply keywords and blocked terms.

This module focuses strictly on matching; the reply decision lives in
`reply_auto.matcher.rules`.

Example:
    >>> match_terms("What's your Pricing model?", ["pricing", "refund"])
    ['pricing']
    >>> has_match("Is this spam?", ["SPAM"])
    True
"""

from __future__ import annotations

from typing import List, Sequence


def match_terms(text: str, terms: Sequence[str]) -> List[str]:
    """
    Perform case-insensitive substring matching between text and configured terms.

    Args:
        text: Text submitted for analysis.
        terms: Configured keywords or blocked terms, in display order.

    Returns:
        The terms found in the text, in configured order. Duplicate entries in
        `terms` are reported once per entry.
    """
    lowered = text.lower()
    matches: List[str] = []

    for term in terms:
        if not isinstance(term, str) or not term:
            continue

        if term.lower() in lowered:
            matches.append(term)

    return matches


def has_match(text: str, terms: Sequence[str]) -> bool:
    """
    Check whether any configured term appears in the text.

    Args:
        text: Text submitted for analysis.
        terms: Configured keywords or blocked terms.

    Returns:
        True if at least one term matches (case-insensitive), otherwise False.
    """
    return bool(match_terms(text, terms))
