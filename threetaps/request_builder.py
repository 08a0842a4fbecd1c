# threetaps/request_builder.py
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    url: str
    data: Dict[str, str] = field(default_factory=dict)


def endpoint_url(server: str, path: str) -> str:
    return f"{server.rstrip('/')}/{path.lstrip('/')}"


def build_get(server: str, path: str, params: Optional[Mapping[str, Any]] = None) -> RequestDescriptor:
    """
    GET request with params in the query string, in the order given.
    None values are dropped rather than sent empty.
    """
    url = endpoint_url(server, path)
    pairs = [(k, str(v)) for k, v in (params or {}).items() if v is not None]
    if pairs:
        url = f"{url}?{urlencode(pairs)}"
    return RequestDescriptor(method="GET", url=url)


def build_post(
    server: str,
    path: str,
    payload: Any,
    agent_id: Optional[str] = None,
    auth_id: Optional[str] = None,
) -> RequestDescriptor:
    """
    POST request whose form body holds the JSON-encoded payload under "data",
    plus agentID/authID when both credentials are known.
    """
    data = {"data": json.dumps(payload)}
    if agent_id and auth_id:
        data["agentID"] = agent_id
        data["authID"] = auth_id
    return RequestDescriptor(method="POST", url=endpoint_url(server, path), data=data)
