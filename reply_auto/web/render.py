"""
Text rendering of an analysis result for the result panel.
"""

from __future__ import annotations

from typing import List

from reply_auto.models import AnalysisResult

REPLY_VERDICT = "✓ This text should receive a reply"
NO_REPLY_VERDICT = "✗ This text should not receive a reply"


def verdict(result: AnalysisResult) -> str:
    return REPLY_VERDICT if result.should_reply else NO_REPLY_VERDICT


def describe_result(result: AnalysisResult) -> List[str]:
    """
    Build the lines shown in the result panel.

    Args:
        result: Analysis outcome to render.

    Returns:
        The verdict line followed by one line per detail. Matched keywords and
        detected topics are only listed when present.
    """
    lines = [
        verdict(result),
        f"Type: {result.type}",
        f"Intent: {result.intent}",
        f"Tone: {result.tone}",
        f"Engagement Value: {result.engagement_value}/10",
    ]
    if result.has_keywords:
        lines.append(f"Matched keywords: {', '.join(result.matched_keywords or ())}")
    if result.keywords:
        lines.append(f"Detected topics: {', '.join(result.keywords)}")
    lines.append(f"Reason: {result.reason}")
    return lines
