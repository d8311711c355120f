"""Reply settings and analysis result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

QUESTION = "question"
STATEMENT = "statement"

DEFAULT_MODEL = "gpt-3.5-turbo"

# Selector options: model identifier -> display label.
MODEL_OPTIONS: Dict[str, str] = {
    "gpt-3.5-turbo": "GPT-3.5 Turbo",
    "gpt-4": "GPT-4",
}

BLOCKED_REASON = "Contains blocked terms"


@dataclass
class ReplySettings:
    """Filter configuration for the current session."""
    reply_to_questions: bool = True
    reply_to_statements: bool = False
    tone_match: str = ""  # Reserved; not read by any rule.
    keywords: list = field(default_factory=list)
    blocked_terms: list = field(default_factory=list)
    model: str = DEFAULT_MODEL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "replyToQuestions": self.reply_to_questions,
            "replyToStatements": self.reply_to_statements,
            "toneMatch": self.tone_match,
            "keywords": list(self.keywords),
            "blockedTerms": list(self.blocked_terms),
            "model": self.model,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis run."""
    type: str
    intent: str
    tone: str
    keywords: Tuple[str, ...]
    engagement_value: Union[int, float]
    recommendation: bool
    reason: str
    should_reply: bool
    has_keywords: Optional[bool] = None
    matched_keywords: Optional[Tuple[str, ...]] = None
    blocked_terms_found: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the field names the browser form expects."""
        data: Dict[str, Any] = {
            "type": self.type,
            "intent": self.intent,
            "tone": self.tone,
            "keywords": list(self.keywords),
            "engagement_value": self.engagement_value,
            "recommendation": self.recommendation,
            "reason": self.reason,
            "shouldReply": self.should_reply,
        }
        if self.has_keywords is not None:
            data["hasKeywords"] = self.has_keywords
        if self.matched_keywords is not None:
            data["matchedKeywords"] = list(self.matched_keywords)
        if self.blocked_terms_found is not None:
            data["blockedTermsFound"] = list(self.blocked_terms_found)
        return data
