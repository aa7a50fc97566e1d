import copy
import json
import logging
import re
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Greedy on purpose: first "{" through the last "}" survives markdown fences and chatter
_JSON_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Pull the brace-delimited JSON object out of free-form model output.

    Raises:
        ValueError: no object found, invalid JSON, or the JSON is not an object.
    """
    match = _JSON_BLOCK.search(text or "")
    if not match:
        raise ValueError("No JSON found in response")
    data = json.loads(match.group())  # JSONDecodeError is a ValueError
    if not isinstance(data, dict):
        raise ValueError("AI response JSON is not an object")
    return data


def parse_or_fallback(text: str, fallback: Dict[str, Any]) -> Dict[str, Any]:
    """Like extract_json_object, but substitutes a copy of ``fallback`` on failure."""
    try:
        return extract_json_object(text)
    except ValueError as e:
        logger.error(f"Failed to parse AI response ({e}); using fallback", extra={"raw": (text or "")[:2000]})
        return copy.deepcopy(fallback)
