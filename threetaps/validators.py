# threetaps/validators.py
import json
import re
from datetime import datetime
from typing import Any, Callable, Dict

from .errors import ValidationError

SOURCE_RE = re.compile(r"\w{5}", re.ASCII)
CATEGORY_RE = re.compile(r"\w{4}(?:\+OR\+\w{4})*", re.ASCII)
LOCATION_RE = re.compile(r"\w{3}(?:\+OR\+\w{3})*", re.ASCII)
TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)
LIST_RE = re.compile(r"\w+(?:,\w+)*", re.ASCII)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Field names of the Posting API that a search may return.
RETVALS = frozenset({
    "source", "category", "location", "longitude", "latitude", "heading", "body",
    "image", "externalURL", "userID", "timestamp", "externalID", "annotations", "postKey",
})

DIMENSIONS = ("source", "category", "location")


def is_source(value: Any) -> bool:
    return isinstance(value, str) and SOURCE_RE.fullmatch(value) is not None


def is_category(value: Any) -> bool:
    """One or more 4-character codes joined by +OR+."""
    return isinstance(value, str) and CATEGORY_RE.fullmatch(value) is not None


def is_location(value: Any) -> bool:
    """One or more 3-character codes joined by +OR+."""
    return isinstance(value, str) and LOCATION_RE.fullmatch(value) is not None


def is_timestamp(value: Any) -> bool:
    if not isinstance(value, str) or TIMESTAMP_RE.fullmatch(value) is None:
        return False
    try:
        datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        return False
    return True


def is_json_map(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        decoded = json.loads(value)
    except (ValueError, RecursionError):
        return False
    return isinstance(decoded, dict)


def is_list(value: Any) -> bool:
    return isinstance(value, str) and LIST_RE.fullmatch(value) is not None


def is_retvals(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return all(name in RETVALS for name in value.split(","))


def is_dimension(value: Any) -> bool:
    return isinstance(value, str) and value in DIMENSIONS


def is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and re.fullmatch(r"[+-]?\d+", value) is not None


def is_str(value: Any) -> bool:
    return isinstance(value, str)


PREDICATES: Dict[str, Callable[[Any], bool]] = {
    "Int": is_int,
    "Str": is_str,
    "Source": is_source,
    "Category": is_category,
    "Location": is_location,
    "Timestamp": is_timestamp,
    "JSONMap": is_json_map,
    "List": is_list,
    "Retvals": is_retvals,
    "Dimension": is_dimension,
}

MESSAGES: Dict[str, str] = {
    "Int": "must be an integer",
    "Str": "must be a string",
    "Source": "source must have 5 characters long",
    "Category": "category must have 4 characters long",
    "Location": "location must have 3 characters long",
    "Timestamp": "must be a valid date in format YYYY-MM-DD HH:MM:SS",
    "JSONMap": "must be a valid JSON map of key/value pairs",
    "List": "must contain a comma-separated list of fields",
    "Retvals": (
        "must contain a comma-separated list of the "
        "fields with the same name as defined in the Posting API"
    ),
    "Dimension": "must contain the dimension to summarize across: source, category, or location.",
}


def validate(field: str, kind: str, value: Any) -> Any:
    """
    Check value against the named type and return it untouched.
    Raises ValidationError carrying the field name and the type's message.
    """
    if not PREDICATES[kind](value):
        raise ValidationError(field, MESSAGES[kind])
    return value
