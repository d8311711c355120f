"""
Shared fixtures for the reply analyzer tests.
"""
import pytest

from reply_auto.config.settings import AppConfig
from reply_auto.llm.schemas import ClassifierPayload


def make_payload(**overrides):
    """Build a classifier payload with sensible defaults."""
    data = {
        "type": "statement",
        "intent": "share an opinion",
        "tone": "casual",
        "keywords": ["product"],
        "engagement_value": 3,
        "recommendation": False,
        "reason": "Low value statement",
    }
    data.update(overrides)
    return ClassifierPayload(**data)


class FakeClassifier:
    """Stand-in for `classify_text` that records every call."""

    def __init__(self, payload=None, error=None):
        self.payload = payload or make_payload()
        self.error = error
        self.calls = []

    def __call__(self, content, model, config):
        self.calls.append((content, model))
        if self.error:
            raise self.error
        return self.payload


@pytest.fixture
def config():
    """Configuration with an API key present."""
    return AppConfig(openai_api_key="sk-test")


@pytest.fixture
def config_without_key():
    """Configuration with no API key."""
    return AppConfig(openai_api_key="")
