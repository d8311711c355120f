"""
Classifier payload schema.

The chat-completion content is expected to be a JSON object with the fields
below. Validation is strict so malformed answers are rejected instead of being
coerced.
"""

from __future__ import annotations

import json
from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from reply_auto.errors import ParseError


class ClassifierPayload(BaseModel):
    """
    Validated classifier answer.

    `engagement_value` is expected in 1-10 but is passed through unchanged.
    Extra fields returned by the model are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    type: Literal["question", "statement"] = Field(..., description="Kind of text")
    intent: str = Field(..., description="Apparent intent of the text")
    tone: str = Field(..., description="Tone of the text")
    keywords: List[str] = Field(..., description="Topical keywords detected by the model")
    engagement_value: Union[int, float] = Field(..., description="Reply-worthiness rating, 1-10")
    recommendation: bool = Field(..., description="Model's own reply recommendation")
    reason: str = Field(..., description="Explanation of the recommendation")


def parse_classifier_content(content: str) -> ClassifierPayload:
    """
    Decode and validate the message content returned by the classifier.

    Args:
        content: JSON-encoded string from `choices[0].message.content`.

    Returns:
        The validated ClassifierPayload.

    Raises:
        ParseError: If the content is not JSON or does not match the schema.
    """
    try:
        data = json.loads(content)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Classifier content is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ParseError(f"Classifier content must be a JSON object, got {type(data).__name__}.")

    try:
        return ClassifierPayload.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Classifier content has unexpected shape: {exc}") from exc
