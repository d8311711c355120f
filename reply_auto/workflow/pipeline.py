"""
Analysis pipeline:
(1) credential check → (2) blocked-term veto → (3) LLM classification
→ (4) keyword match → (5) merge into the final reply decision.

`analyze_text` is the pure pipeline; `AnalyzerSession` wraps it with the state
of one form session (settings, busy flag, last result, last error).
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from reply_auto.config.settings import AppConfig
from reply_auto.errors import AnalysisInProgressError, ConfigurationError, ReplyAnalyzerError
from reply_auto.llm.client import classify_text
from reply_auto.llm.schemas import ClassifierPayload
from reply_auto.matcher.keyword_matcher import match_terms
from reply_auto.matcher.rules import should_reply
from reply_auto.models import BLOCKED_REASON, MODEL_OPTIONS, STATEMENT, AnalysisResult, ReplySettings
from reply_auto.settings.store import SettingsStore
from reply_auto.utils.logger import get_logger
from reply_auto.web.render import describe_result

logger = get_logger(__name__)

Classifier = Callable[[str, str, AppConfig], ClassifierPayload]


def blocked_result(blocked_terms_found: list) -> AnalysisResult:
    """Result for text vetoed by a blocked term; no classifier fields are known."""
    return AnalysisResult(
        type=STATEMENT,
        intent="",
        tone="",
        keywords=(),
        engagement_value=0,
        recommendation=False,
        reason=BLOCKED_REASON,
        should_reply=False,
        blocked_terms_found=tuple(blocked_terms_found),
    )


def analyze_text(
    input_text: str,
    settings: ReplySettings,
    config: AppConfig,
    classify: Classifier = classify_text,
) -> AnalysisResult:
    """
    Decide whether the input text should receive a reply.

    Args:
        input_text: Text to analyze; empty text is forwarded unchanged.
        settings: Current reply settings.
        config: Application configuration (API key, endpoint).
        classify: Classifier callable, `classify(text, model, config)`.

    Returns:
        The AnalysisResult for this run.

    Raises:
        ConfigurationError: If the API key is missing (checked before anything else).
        TransportError: If the classifier request fails.
        ParseError: If the classifier answer is malformed.
    """
    if not config.has_api_key:
        raise ConfigurationError("OPENAI_API_KEY is not set; analysis skipped.")

    blocked = match_terms(input_text, settings.blocked_terms)
    if blocked:
        logger.info(f"Blocked terms found: {blocked}; skipping classifier")
        return blocked_result(blocked)

    payload = classify(input_text, settings.model, config)

    matched = match_terms(input_text, settings.keywords)
    has_keywords = bool(matched)
    decision = should_reply(payload.type, payload.engagement_value, has_keywords, settings)

    logger.info(
        f"Decision: should_reply={decision} (type={payload.type}, "
        f"engagement={payload.engagement_value}, matched_keywords={matched})"
    )
    return AnalysisResult(
        type=payload.type,
        intent=payload.intent,
        tone=payload.tone,
        keywords=tuple(payload.keywords),
        engagement_value=payload.engagement_value,
        recommendation=payload.recommendation,
        reason=payload.reason,
        should_reply=decision,
        has_keywords=has_keywords,
        matched_keywords=tuple(matched),
    )


class AnalyzerSession:
    """
    State of one analyzer form: settings, busy flag, last result and error.

    Only one analysis may be in flight at a time; a second request while busy
    raises AnalysisInProgressError. A failed analysis leaves the previous
    result in place and records a user-facing error message.

    Example:
        session = AnalyzerSession(load_config())
        session.store.add_blocked_term("spam")
        session.analyze("Is this spam?")
        print(session.result.should_reply, session.error)
    """

    def __init__(
        self,
        config: AppConfig,
        store: Optional[SettingsStore] = None,
        classify: Classifier = classify_text,
    ):
        self.config = config
        self.store = store or SettingsStore()
        self.classify = classify
        self.is_analyzing = False
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None
        self.failure: Optional[ReplyAnalyzerError] = None
        self._lock = threading.Lock()

    def analyze(self, input_text: str) -> Optional[AnalysisResult]:
        """
        Run the pipeline with the current settings and record the outcome.

        Returns:
            The new AnalysisResult, or None if the analysis failed (see `error`).

        Raises:
            AnalysisInProgressError: If another analysis is still running.
        """
        if not self.config.has_api_key:
            self._fail(ConfigurationError("OPENAI_API_KEY is not set; analysis skipped."))
            return None

        with self._lock:
            if self.is_analyzing:
                raise AnalysisInProgressError()
            self.is_analyzing = True
            self.error = None
            self.failure = None

        try:
            self.result = analyze_text(input_text, self.store.settings, self.config, self.classify)
            return self.result
        except ReplyAnalyzerError as exc:
            self._fail(exc)
            return None
        finally:
            self.is_analyzing = False

    def _fail(self, exc: ReplyAnalyzerError) -> None:
        logger.error(f"Analysis failed: {exc}")
        self.failure = exc
        self.error = exc.user_message

    def snapshot(self) -> Dict[str, Any]:
        """Return the session state in the JSON shape used by the form."""
        return {
            "settings": self.store.settings.to_dict(),
            "result": self.result.to_dict() if self.result else None,
            "summary": describe_result(self.result) if self.result else [],
            "error": self.error,
            "isAnalyzing": self.is_analyzing,
            "apiKeyConfigured": self.config.has_api_key,
            "models": [{"id": model_id, "label": label} for model_id, label in MODEL_OPTIONS.items()],
        }
