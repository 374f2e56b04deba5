"""
Model reply parsing.

Strips the markdown code fences models wrap JSON in and decodes the
remainder.

Dependencies: json, re
System role: Text cleanup between the chat model and the schemas
"""

import json
import logging
import re
from typing import Any

from interview_prep.core.exceptions import UpstreamFormatError

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```json\s*")
_TRAILING_FENCE = re.compile(r"```$")


def strip_code_fences(text: str) -> str:
    """
    Remove a leading ```json fence and a trailing ``` fence.

    Args:
        text: Raw model reply

    Returns:
        str: Trimmed reply without the fences
    """
    cleaned = _LEADING_FENCE.sub("", text.strip())
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_json_reply(text: str) -> Any:
    """
    Decode a model reply as JSON.

    Args:
        text: Raw model reply

    Returns:
        Any: Decoded JSON value

    Raises:
        UpstreamFormatError: If the cleaned reply is not valid JSON
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(
            "Model reply is not valid JSON",
            extra={"error": str(e), "reply_length": len(text)},
        )
        raise UpstreamFormatError() from e
