# threetaps/http_client.py
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

import requests


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    reason: str
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    def get(self, url: str) -> HttpResponse: ...

    def post(self, url: str, data: Dict[str, Any]) -> HttpResponse: ...


class HttpClient:
    """
    requests-backed transport. Status codes are returned, not raised;
    connection errors and timeouts surface as requests exceptions.
    """

    def __init__(self, timeout_sec: int = 20, session: Optional[requests.Session] = None):
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()

    def get(self, url: str) -> HttpResponse:
        resp = self.session.get(url, timeout=self.timeout_sec)
        return _wrap(resp)

    def post(self, url: str, data: Dict[str, Any]) -> HttpResponse:
        # form-encoded body
        resp = self.session.post(url, data=data, timeout=self.timeout_sec)
        return _wrap(resp)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def _wrap(resp: requests.Response) -> HttpResponse:
    return HttpResponse(status_code=resp.status_code, reason=resp.reason or "", text=resp.text)
