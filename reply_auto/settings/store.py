"""
In-memory store for the reply settings of one session.

The module-level functions are pure: each takes a ReplySettings value and
returns an updated copy. SettingsStore holds the current value and applies
them. Nothing is persisted.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional

from reply_auto.models import ReplySettings
from reply_auto.utils.logger import get_logger

logger = get_logger(__name__)

# Accepted toggle names (original camelCase and snake_case) -> dataclass field.
TOGGLE_FIELDS: Dict[str, str] = {
    "replyToQuestions": "reply_to_questions",
    "replyToStatements": "reply_to_statements",
    "reply_to_questions": "reply_to_questions",
    "reply_to_statements": "reply_to_statements",
}


def toggle_setting(settings: ReplySettings, setting_name: str) -> ReplySettings:
    """
    Flip a boolean setting.

    Args:
        settings: Current settings.
        setting_name: Name of a boolean field, snake_case or camelCase.

    Returns:
        A copy of the settings with the field flipped.

    Raises:
        ValueError: If the name does not refer to a boolean setting.
    """
    field_name = TOGGLE_FIELDS.get(setting_name)
    if field_name is None:
        raise ValueError(f"Unknown toggle setting: {setting_name!r}")
    return replace(settings, **{field_name: not getattr(settings, field_name)})


def append_term(terms: List[str], term: str) -> Optional[List[str]]:
    """
    Append a trimmed term to a copy of the list.

    Args:
        terms: Existing terms.
        term: Raw user input.

    Returns:
        The new list, or None if the trimmed input is empty.
    """
    cleaned = term.strip()
    if not cleaned:
        return None
    return [*terms, cleaned]


def drop_term(terms: List[str], index: int) -> Optional[List[str]]:
    """
    Remove the entry at `index` from a copy of the list.

    Returns:
        The new list, or None if the index is out of range (negative included).
    """
    if not 0 <= index < len(terms):
        return None
    return [t for i, t in enumerate(terms) if i != index]


class SettingsStore:
    """
    Holds the current ReplySettings and exposes update operations.

    Example:
        store = SettingsStore()
        store.add_keyword("pricing")
        store.toggle("replyToStatements")
    """

    def __init__(self, settings: Optional[ReplySettings] = None):
        self.settings = settings or ReplySettings()

    def toggle(self, setting_name: str) -> bool:
        """
        Flip a boolean setting and return its new value.

        Raises:
            ValueError: If the name does not refer to a boolean setting.
        """
        self.settings = toggle_setting(self.settings, setting_name)
        value = getattr(self.settings, TOGGLE_FIELDS[setting_name])
        logger.info(f"Setting {TOGGLE_FIELDS[setting_name]} -> {value}")
        return value

    def add_keyword(self, term: str) -> bool:
        return self._add("keywords", term)

    def add_blocked_term(self, term: str) -> bool:
        return self._add("blocked_terms", term)

    def remove_keyword(self, index: int) -> bool:
        return self._remove("keywords", index)

    def remove_blocked_term(self, index: int) -> bool:
        return self._remove("blocked_terms", index)

    def set_model(self, model_id: str) -> None:
        """Replace the model identifier; any string is accepted."""
        self.settings = replace(self.settings, model=model_id)
        logger.info(f"Model set to {model_id!r}")

    def reset(self) -> None:
        """Restore the default settings."""
        self.settings = ReplySettings()
        logger.info("Settings reset to defaults")

    def _add(self, field_name: str, term: str) -> bool:
        updated = append_term(getattr(self.settings, field_name), term)
        if updated is None:
            return False
        self.settings = replace(self.settings, **{field_name: updated})
        logger.info(f"Added {updated[-1]!r} to {field_name}")
        return True

    def _remove(self, field_name: str, index: int) -> bool:
        current = getattr(self.settings, field_name)
        updated = drop_term(current, index)
        if updated is None:
            logger.info(f"Ignored removal of {field_name}[{index}] (size {len(current)})")
            return False
        self.settings = replace(self.settings, **{field_name: updated})
        logger.info(f"Removed {current[index]!r} from {field_name}")
        return True
