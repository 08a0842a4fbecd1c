# threetaps/models.py
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import ValidationError
from .validators import validate

# Search query fields and their types, in the order they are sent.
SEARCH_FIELDS: Dict[str, str] = {
    "rpp": "Int",
    "page": "Int",
    "source": "Source",
    "category": "Category",
    "location": "Location",
    "heading": "Str",
    "body": "Str",
    "text": "Str",
    "poster": "Str",
    "externalID": "Str",
    "start": "Timestamp",
    "end": "Timestamp",
    "annotations": "JSONMap",
    "trustedAnnotations": "JSONMap",
    "retvals": "Retvals",
}


@dataclass(frozen=True)
class PostingStatusUpdate:
    source: str
    external_id: str
    status: str
    timestamp: Optional[str] = None
    attributes: Optional[Dict[str, str]] = None

    def to_payload(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "source": self.source,
            "externalID": self.external_id,
            "status": self.status,
        }
        if self.timestamp is not None:
            out["timestamp"] = self.timestamp
        if self.attributes is not None:
            out["attributes"] = dict(self.attributes)
        return out


@dataclass(frozen=True)
class StatusQueryId:
    source: str
    external_id: str

    def to_payload(self) -> Dict[str, Any]:
        return {"source": self.source, "externalID": self.external_id}


StatusUpdateLike = Union[PostingStatusUpdate, Mapping[str, Any]]
StatusIdLike = Union[StatusQueryId, Mapping[str, Any]]


def validate_search_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Check each supplied search field against its type.
    Returns the fields that are present (None means absent), in wire order.
    """
    for name in params:
        if name not in SEARCH_FIELDS:
            raise ValidationError(name, "is not a recognized search parameter")

    out: Dict[str, Any] = {}
    for name, kind in SEARCH_FIELDS.items():
        value = params.get(name)
        if value is None:
            continue
        out[name] = validate(name, kind, value)
    return out


def _require_text(field: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise ValidationError(field, "must be a non-empty string")


def _as_payload(item: Any, field: str) -> Dict[str, Any]:
    if isinstance(item, (PostingStatusUpdate, StatusQueryId)):
        return item.to_payload()
    if isinstance(item, Mapping):
        return dict(item)
    raise ValidationError(field, f"must be a mapping, got {type(item).__name__}")


def _require_json(field: str, entry: Dict[str, Any]) -> None:
    try:
        json.dumps(entry)
    except (TypeError, ValueError, RecursionError) as e:
        raise ValidationError(field, f"must be JSON serializable ({e})") from None


def _require_sequence(field: str, items: Any) -> List[Any]:
    if isinstance(items, (str, bytes, Mapping)) or not hasattr(items, "__iter__"):
        raise ValidationError(field, "must be a sequence")
    items = list(items)
    if not items:
        raise ValidationError(field, "must contain at least one entry")
    return items


def posting_updates_payload(postings: Any) -> List[Dict[str, Any]]:
    items = _require_sequence("postings", postings)
    payload = []
    for i, item in enumerate(items):
        field = f"postings[{i}]"
        entry = _as_payload(item, field)
        validate(f"{field}.source", "Source", entry.get("source"))
        _require_text(f"{field}.externalID", entry.get("externalID"))
        _require_text(f"{field}.status", entry.get("status"))

        ts = entry.get("timestamp")
        if ts is not None and not isinstance(ts, str):
            raise ValidationError(f"{field}.timestamp", "must be a string")

        attrs = entry.get("attributes")
        if attrs is not None:
            if not isinstance(attrs, Mapping) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in attrs.items()
            ):
                raise ValidationError(f"{field}.attributes", "must map strings to strings")
        _require_json(field, entry)
        payload.append(entry)
    return payload


def status_ids_payload(ids: Any) -> List[Dict[str, Any]]:
    items = _require_sequence("ids", ids)
    payload = []
    for i, item in enumerate(items):
        field = f"ids[{i}]"
        entry = _as_payload(item, field)
        validate(f"{field}.source", "Source", entry.get("source"))
        _require_text(f"{field}.externalID", entry.get("externalID"))
        _require_json(field, entry)
        payload.append(entry)
    return payload

