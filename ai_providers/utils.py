"""
Utility functions shared by the providers.

- JSON response cleanup for generate_json()
"""
from __future__ import annotations

import json
import re
from typing import Any

from ai_providers.config import get_logger

logger = get_logger("utils")

_JSON_FENCE = re.compile(r"```json\s*(.*?)(?:```|$)", re.S | re.I)
_ANY_FENCE = re.compile(r"```[\w-]*\s*(.*?)(?:```|$)", re.S)


def clean_json_response(response: str) -> str:
    """
    Strip Markdown code fences models like to wrap JSON in.

    A ```json fence wins over a bare ``` fence. Text without fences is
    only trimmed.
    """
    cleaned = response.strip()

    match = _JSON_FENCE.search(cleaned) or _ANY_FENCE.search(cleaned)
    if match:
        cleaned = match.group(1)

    return cleaned.strip()


def parse_json_response(response: str) -> Any:
    """
    Parse a model reply as JSON.

    Tries the raw reply first, then the fence-stripped one.

    Raises:
        json.JSONDecodeError: If neither form is valid JSON
    """
    try:
        return json.loads(response)
    except json.JSONDecodeError:
        logger.debug("Reply is not bare JSON, stripping code fences")
        return json.loads(clean_json_response(response))
