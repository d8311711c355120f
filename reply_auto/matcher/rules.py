"""
Rules for determining reply eligibility.
"""

from typing import Union

from reply_auto.models import QUESTION, STATEMENT, ReplySettings

# Classifier engagement rating (1-10) at which a reply is always warranted.
ENGAGEMENT_THRESHOLD = 7


def is_engaging(engagement_value: Union[int, float], threshold: float = ENGAGEMENT_THRESHOLD) -> bool:
    """
    Decide whether the classifier's engagement rating alone warrants a reply.

    Args:
        engagement_value: Rating reported by the classifier, passed through unclamped.
        threshold: Minimum rating required.

    Returns:
        True if the rating meets the threshold, otherwise False.
    """
    return engagement_value >= threshold


def type_allowed(text_type: str, settings: ReplySettings) -> bool:
    """
    Check the question/statement toggles against the classified text type.

    Args:
        text_type: Classifier label, compared with exact case.
        settings: Current reply settings.

    Returns:
        True if the toggle for this text type is on.
    """
    if text_type == QUESTION:
        return settings.reply_to_questions
    if text_type == STATEMENT:
        return settings.reply_to_statements
    return False


def should_reply(
    text_type: str,
    engagement_value: Union[int, float],
    has_keywords: bool,
    settings: ReplySettings,
) -> bool:
    """
    Combine the classifier output with the local rules into the final decision.

    Any single satisfied condition forces a reply: an enabled text type, a
    matched keyword, or an engagement rating at or above the threshold. The
    classifier's own recommendation is not consulted.

    Args:
        text_type: Classifier label ("question" or "statement").
        engagement_value: Classifier engagement rating.
        has_keywords: Whether any configured keyword matched the text.
        settings: Current reply settings.

    Returns:
        True if the text should receive a reply.
    """
    return (
        type_allowed(text_type, settings)
        or has_keywords
        or is_engaging(engagement_value)
    )
