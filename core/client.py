from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import httpx
import structlog

from core.config import ProcessConfig
from core.errors import UpstreamError

API_KEY_HEADER = "x-freepik-api-key"

log = structlog.get_logger()


def path_segment(value: Any) -> str:
    """Percent-encode an identifier before placing it in a URL path."""
    return quote(str(value), safe="")


def compact(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop parameters that resolved to nothing. Never send empty placeholders."""
    return {
        key: value
        for key, value in values.items()
        if value is not None and value != ""
    }


class FreepikClient:
    """
    Thin wrapper over one httpx.Client bound to the Freepik API.
    Every method issues exactly one request and returns decoded JSON.
    """

    def __init__(
        self,
        config: ProcessConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._http = httpx.Client(
            base_url=config.base_url,
            headers={API_KEY_HEADER: config.api_key},
            timeout=config.timeout_s,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._send("GET", path, params=compact(params or {}))

    def post_json(self, path: str, body: Optional[Mapping[str, Any]] = None) -> Any:
        return self._send("POST", path, json=compact(body or {}))

    def post_form(self, path: str, fields: Mapping[str, Any]) -> Any:
        return self._send("POST", path, data=compact(fields))

    def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        log.debug("upstream.request", method=method, path=path)
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            log.warning("upstream.error", method=method, path=path, error=str(exc))
            raise UpstreamError(f"Request to {path} failed: {exc}") from exc

        if response.is_error:
            message = f"Request failed with status code {response.status_code}"
            detail = _error_detail(response)
            if detail:
                message = f"{message}: {detail}"
            log.warning(
                "upstream.error",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise UpstreamError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(f"Invalid JSON in response from {path}") from exc


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return ""

    if isinstance(body, dict):
        detail = body.get("message") or body.get("detail") or body.get("error")
        if isinstance(detail, str):
            return detail
    return ""
