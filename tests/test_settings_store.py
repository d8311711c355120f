"""
Unit tests for the reply settings store.
"""
import pytest

from reply_auto.models import DEFAULT_MODEL, ReplySettings
from reply_auto.settings.store import SettingsStore, append_term, drop_term, toggle_setting


class TestDefaults:
    """Tests for the initial settings."""

    def test_default_settings(self):
        """Test the settings a new session starts with."""
        settings = SettingsStore().settings

        assert settings.reply_to_questions is True
        assert settings.reply_to_statements is False
        assert settings.tone_match == ""
        assert settings.keywords == []
        assert settings.blocked_terms == []
        assert settings.model == DEFAULT_MODEL

    def test_to_dict_uses_form_names(self):
        """Test the JSON field names."""
        data = ReplySettings(keywords=["a"], blocked_terms=["b"]).to_dict()

        assert data == {
            "replyToQuestions": True,
            "replyToStatements": False,
            "toneMatch": "",
            "keywords": ["a"],
            "blockedTerms": ["b"],
            "model": "gpt-3.5-turbo",
        }


class TestToggle:
    """Tests for boolean toggles."""

    def test_toggle_camel_case(self):
        """Test toggling with the form's setting name."""
        store = SettingsStore()

        assert store.toggle("replyToStatements") is True
        assert store.settings.reply_to_statements is True

    def test_toggle_snake_case(self):
        """Test toggling with the attribute name."""
        store = SettingsStore()

        assert store.toggle("reply_to_questions") is False
        assert store.toggle("reply_to_questions") is True

    @pytest.mark.parametrize("name", ["keywords", "model", "toneMatch", "unknown"])
    def test_toggle_rejects_non_boolean(self, name):
        """Test that only boolean settings can be toggled."""
        store = SettingsStore()

        with pytest.raises(ValueError):
            store.toggle(name)

    def test_toggle_is_pure(self):
        """Test that the pure helper leaves its input unchanged."""
        original = ReplySettings()
        updated = toggle_setting(original, "replyToQuestions")

        assert original.reply_to_questions is True
        assert updated.reply_to_questions is False


class TestTerms:
    """Tests for keyword and blocked-term lists."""

    def test_add_trims_input(self):
        """Test that surrounding whitespace is removed."""
        store = SettingsStore()

        assert store.add_keyword("  pricing ") is True
        assert store.settings.keywords == ["pricing"]

    def test_add_whitespace_only_is_ignored(self):
        """Test that blank input leaves the list unchanged."""
        store = SettingsStore()
        store.add_keyword("pricing")

        assert store.add_keyword("   ") is False
        assert store.add_blocked_term("") is False
        assert store.settings.keywords == ["pricing"]
        assert store.settings.blocked_terms == []

    def test_add_keeps_duplicates_and_case(self):
        """Test that no dedup or case normalization happens."""
        store = SettingsStore()
        store.add_blocked_term("Spam")
        store.add_blocked_term("Spam")

        assert store.settings.blocked_terms == ["Spam", "Spam"]

    def test_remove_by_index(self):
        """Test removing the entry at a position."""
        store = SettingsStore()
        for term in ("a", "b", "c"):
            store.add_keyword(term)

        assert store.remove_keyword(1) is True
        assert store.settings.keywords == ["a", "c"]

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_remove_out_of_range_is_noop(self, index):
        """Test that bad indexes leave the list unchanged without raising."""
        store = SettingsStore()
        for term in ("x", "y", "z"):
            store.add_blocked_term(term)

        assert store.remove_blocked_term(index) is False
        assert store.settings.blocked_terms == ["x", "y", "z"]

    def test_list_helpers_copy(self):
        """Test that the pure helpers never mutate their input."""
        terms = ["a"]

        assert append_term(terms, "b") == ["a", "b"]
        assert drop_term(terms, 0) == []
        assert terms == ["a"]


class TestModelAndReset:
    """Tests for model selection and reset."""

    def test_set_model_accepts_any_string(self):
        """Test that the model id is not validated."""
        store = SettingsStore()
        store.set_model("my-custom-model")

        assert store.settings.model == "my-custom-model"

    def test_reset(self):
        """Test that reset restores defaults."""
        store = SettingsStore()
        store.add_keyword("pricing")
        store.set_model("gpt-4")
        store.reset()

        assert store.settings == ReplySettings()
