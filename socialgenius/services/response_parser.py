"""
Normalization of raw model output into idea records.

The model is an untrusted text source: total structural failures (no JSON,
no ideas list, zero ideas) raise MalformedOutputError, while missing fields
on individual ideas are filled with placeholders.
"""

import json
import re
from typing import Any, List

from socialgenius.exceptions import MalformedOutputError
from socialgenius.models.idea import IdeaRecord
from socialgenius.utils.constants import IDEA_FIELD_DEFAULTS, IDEAS_FIELD, LOG_SNIPPET_LENGTH
from socialgenius.utils.logger import logger

# Greedy: first "{" to last "}". Spans everything in between when the model
# emits more than one JSON-like block.
JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


def _snippet(text: str) -> str:
    return text[:LOG_SNIPPET_LENGTH]


def extract_json_block(raw_text: str) -> str:
    """
    Locate the JSON object inside the model output, tolerating leading
    commentary and markdown code fences.

    Raises:
        MalformedOutputError: if the text contains no brace-delimited block
    """
    match = JSON_OBJECT_PATTERN.search(raw_text or "")
    if not match:
        logger.error("No JSON found in AI response")
        logger.debug(f"Response received: {_snippet(raw_text or '')}")
        raise MalformedOutputError("AI response does not contain JSON")
    return match.group(0)


def coerce_idea(item: Any, index: int) -> IdeaRecord:
    """
    Build an IdeaRecord from one raw list element, substituting placeholders
    for fields that are missing, blank or not strings.
    """
    source = item if isinstance(item, dict) else {}
    values = {}
    missing = []

    for field, default in IDEA_FIELD_DEFAULTS.items():
        value = source.get(field)
        if isinstance(value, str) and value.strip():
            values[field] = value
        else:
            values[field] = default
            missing.append(field)

    if missing:
        logger.warning(f"Idea #{index + 1} has missing fields {missing}: {_snippet(repr(item))}")

    return IdeaRecord(**values)


def parse_response(raw_text: str) -> List[IdeaRecord]:
    """
    Parse raw model output into a non-empty list of idea records.

    Args:
        raw_text: Text returned by the model

    Returns:
        List of IdeaRecord, in the order the model produced them

    Raises:
        MalformedOutputError: when no JSON is found, the JSON is invalid,
            the ideas list is missing or it is empty
    """
    json_block = extract_json_block(raw_text)

    try:
        parsed = json.loads(json_block)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON from AI response: {e}")
        logger.debug(f"Extracted JSON: {_snippet(json_block)}")
        raise MalformedOutputError("AI response contains invalid JSON") from e

    ideas = parsed.get(IDEAS_FIELD) if isinstance(parsed, dict) else None
    if not isinstance(ideas, list):
        received = list(parsed.keys()) if isinstance(parsed, dict) else type(parsed).__name__
        logger.error(f"Invalid AI response format. Structure received: {received}")
        logger.debug(f"Parsed JSON: {_snippet(json_block)}")
        raise MalformedOutputError(
            f"AI response is missing the '{IDEAS_FIELD}' field or it is not a list"
        )

    if not ideas:
        logger.error("AI response contains an empty ideas list")
        logger.debug(f"Parsed JSON: {_snippet(json_block)}")
        raise MalformedOutputError("AI did not generate any ideas")

    return [coerce_idea(item, index) for index, item in enumerate(ideas)]
