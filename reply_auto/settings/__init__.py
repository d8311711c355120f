"""
In-memory reply settings store.
"""

from reply_auto.settings.store import SettingsStore

__all__ = ["SettingsStore"]
