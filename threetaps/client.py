# threetaps/client.py
"""
Client for the 3taps search and status APIs.

Every method validates its arguments before touching the network, issues a
single request through the injected transport and returns the decoded JSON
body as-is. Nothing is retried.

    client = ThreeTapsClient()
    client.search(location="LAX+OR+NYC", category="VAUT")
    client.count(location="LAX", category="VAUT")
"""
import json
import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from .config import DEFAULT_SERVER, Settings
from .errors import MissingParameterError, RequestFailedError, ResponseDecodeError
from .http_client import HttpClient, HttpResponse, Transport
from .models import (
    StatusIdLike,
    StatusUpdateLike,
    posting_updates_payload,
    status_ids_payload,
    validate_search_params,
)
from .request_builder import RequestDescriptor, build_get, build_post
from .validators import validate

logger = logging.getLogger(__name__)


class ThreeTapsClient:
    def __init__(
        self,
        server: str = DEFAULT_SERVER,
        agent_id: Optional[str] = None,
        auth_id: Optional[str] = None,
        transport: Optional[Transport] = None,
    ):
        self._server = server
        self._agent_id = agent_id
        self._auth_id = auth_id
        self._transport = transport if transport is not None else HttpClient()

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[Transport] = None) -> "ThreeTapsClient":
        return cls(
            server=settings.server,
            agent_id=settings.agent_id if settings.has_credentials else None,
            auth_id=settings.auth_id if settings.has_credentials else None,
            transport=transport if transport is not None else HttpClient(timeout_sec=settings.timeout_sec),
        )

    @property
    def server(self) -> str:
        return self._server

    @property
    def agent_id(self) -> Optional[str]:
        return self._agent_id

    @property
    def transport(self) -> Transport:
        return self._transport

    # ------------------------------------------------------------------ search

    def search(self, **params: Any) -> Any:
        """
        Search postings. Accepts rpp, page, source, category, location, heading,
        body, text, poster, externalID, start, end, annotations,
        trustedAnnotations and retvals; at least one is required.

        Returns the decoded response, e.g.
          {"success": true, "numResults": 0, "execTimeMs": 7, "results": []}
        """
        query = self._search_query(params)
        return self._get("search", query)

    def count(self, **params: Any) -> Any:
        """Number of postings matching the same parameters as search: {"count": N}."""
        query = self._search_query(params)
        return self._get("search/count", query)

    def best_match(self, keywords: str) -> Any:
        """Category that best matches the keywords, with its result count."""
        validate("keywords", "Str", keywords)
        return self._get("search/best-match", {"keywords": keywords})

    def range(self, fields: str, **params: Any) -> Any:
        """
        Min and max values of each comma-separated field (fields or annotations)
        among postings matching the search parameters.
        """
        validate("fields", "List", fields)
        query = self._search_query(params)
        query["fields"] = fields
        return self._get("search/range", query)

    def summary(self, dimension: str, **params: Any) -> Any:
        """Totals of matching postings across source, category or location."""
        validate("dimension", "Dimension", dimension)
        query = self._search_query(params)
        query["dimension"] = dimension
        return self._get("search/summary", query)

    # ------------------------------------------------------------------ status

    def update_status(self, postings: Sequence[StatusUpdateLike]) -> Any:
        payload = posting_updates_payload(postings)
        return self._post("status/update", payload)

    def get_status(self, ids: Sequence[StatusIdLike]) -> Any:
        payload = status_ids_payload(ids)
        return self._post("status/get", payload)

    def system_status(self) -> Any:
        return self._get("status/system")

    # ------------------------------------------------------------------ private

    def _search_query(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        query = validate_search_params(params)
        if not query:
            raise MissingParameterError()
        return query

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        request = build_get(self._server, path, params)
        logger.debug("GET %s", request.url)
        response = self._transport.get(request.url)
        return self._decode(request, response)

    def _post(self, path: str, payload: Any) -> Any:
        request = build_post(self._server, path, payload, self._agent_id, self._auth_id)
        logger.debug("POST %s (%d entries)", request.url, len(payload))
        response = self._transport.post(request.url, request.data)
        return self._decode(request, response)

    def _decode(self, request: RequestDescriptor, response: HttpResponse) -> Any:
        if not response.ok:
            logger.warning(
                "%s %s failed: %s %s", request.method, request.url, response.status_code, response.reason
            )
            raise RequestFailedError(response.status_code, response.reason, url=request.url)

        try:
            return json.loads(response.text)
        except (ValueError, RecursionError):
            logger.warning("%s %s returned a body that is not JSON", request.method, request.url)
            raise ResponseDecodeError(response.text, url=request.url) from None

