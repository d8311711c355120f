"""
OpenAI Chat Completions client used to classify text.

Example:
    >>> from reply_auto.config.settings import load_config
    >>> payload = classify_text("What's your pricing model?", "gpt-4", load_config())
    >>> print(payload.type, payload.engagement_value)
"""

from __future__ import annotations

from typing import Any, Dict, List

import requests

from reply_auto.config.settings import AppConfig
from reply_auto.errors import ParseError, TransportError
from reply_auto.llm.schemas import ClassifierPayload, parse_classifier_content
from reply_auto.utils.logger import get_logger

logger = get_logger(__name__)

CLASSIFIER_PROMPT = (
    "Analyze the following text and provide a JSON response with these fields:\n"
    '- type: "question" | "statement"\n'
    "- intent: brief description of the apparent intent\n"
    "- tone: description of the tone (professional, casual, aggressive, etc.)\n"
    "- keywords: array of important topical keywords\n"
    "- engagement_value: number 1-10 rating how much this deserves a response\n"
    "- recommendation: boolean whether to reply\n"
    "- reason: brief explanation of the recommendation"
)

TEMPERATURE = 0.7


def build_request_body(content: str, model: str, prompt: str = CLASSIFIER_PROMPT) -> Dict[str, Any]:
    """
    Build the chat-completion body for a classification request.

    Args:
        content: Raw text to classify, sent unchanged as the user message.
        model: Model identifier chosen in the settings.
        prompt: System instruction describing the expected JSON shape.

    Returns:
        JSON-serializable request body.
    """
    messages: List[Dict[str, str]] = [
        {"role": "system", "content": prompt},
        {"role": "user", "content": content},
    ]
    return {
        "messages": messages,
        "model": model,
        "temperature": TEMPERATURE,
        "response_format": {"type": "json_object"},
    }


def call_chatgpt(content: str, model: str, config: AppConfig, prompt: str = CLASSIFIER_PROMPT) -> str:
    """
    Call the OpenAI Chat Completions API and return the model's content response.

    Args:
        content: Text to evaluate.
        model: Model name to call.
        config: Application configuration holding the API key and endpoint.
        prompt: System instruction.

    Returns:
        Response content string (expected to be JSON).

    Raises:
        ConfigurationError: If OPENAI_API_KEY is missing.
        TransportError: If the request fails or returns a non-success status.
        ParseError: If the response body lacks `choices[0].message.content`.
    """
    api_key = config.require_api_key()

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
    body = build_request_body(content, model, prompt)

    logger.info(f"Requesting classification from {model} ({len(content)} chars)")
    try:
        resp = requests.post(config.api_url, json=body, headers=headers, timeout=config.request_timeout)
    except requests.RequestException as exc:
        raise TransportError(f"ChatGPT API request failed: {exc}") from exc

    if not resp.ok:
        raise TransportError(f"ChatGPT API error {resp.status_code}: {resp.text}", status_code=resp.status_code)

    try:
        data = resp.json()
        return data["choices"][0]["message"]["content"]
    except ValueError as exc:
        raise ParseError("Failed to decode ChatGPT API response as JSON.") from exc
    except (KeyError, IndexError, TypeError) as exc:
        raise ParseError(f"ChatGPT API response missing message content: {exc!r}") from exc


def classify_text(content: str, model: str, config: AppConfig) -> ClassifierPayload:
    """
    Classify text with the configured model and validate the answer.

    Args:
        content: Text to classify.
        model: Model identifier.
        config: Application configuration.

    Returns:
        The validated classifier payload.
    """
    payload = parse_classifier_content(call_chatgpt(content, model, config))
    logger.info(f"Classified as {payload.type} (engagement {payload.engagement_value})")
    return payload
