from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from config import ShyftConfig

logger = logging.getLogger(__name__)

# API docs: https://docs.shyft.to/solana-apis/compressed-nfts
# API keys: https://shyft.to/get-api-key


class ShyftAPIError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, payload: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class ShyftRestClient:
    """Sends authenticated requests to the Shyft API and checks the response envelope."""

    def __init__(self, config: ShyftConfig, session: requests.Session | None = None) -> None:
        self.api_key = config.api_key
        self.base_url = config.base_url.rstrip("/")
        self.timeout = config.timeout
        self._session = session or requests.Session()

        # Only reads are replayed; mints and transfers must not be sent twice.
        retries = Retry(
            total=config.retry_attempts,
            backoff_factor=config.retry_backoff_seconds,
            status_forcelist=[429],
            allowed_methods=frozenset({"GET"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retries)
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    def request(
        self,
        method: str,
        path: str,
        *,
        data: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("Shyft request method=%s path=%s", method, path)
        try:
            response = self._session.request(
                method,
                url,
                json=data,
                params=params,
                timeout=self.timeout,
                headers={"x-api-key": self.api_key},
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            resp = exc.response
            status_code = getattr(resp, "status_code", None)
            error_payload: Any | None = None
            message = "Shyft API request failed"
            if resp is not None:
                try:
                    error_payload = resp.json()
                    if isinstance(error_payload, dict) and error_payload.get("message"):
                        message = str(error_payload["message"])
                except ValueError:
                    error_payload = resp.text
            logger.warning("Shyft request failed method=%s path=%s status=%s", method, path, status_code)
            raise ShyftAPIError(message, status_code=status_code, payload=error_payload) from exc
        except requests.RequestException as exc:
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            logger.warning("Shyft request failed method=%s path=%s error=%s", method, path, exc)
            raise ShyftAPIError("Shyft API request failed", status_code=status_code) from exc

        try:
            payload_raw = response.json()
        except ValueError as exc:
            raise ShyftAPIError("Shyft API returned invalid JSON", payload=response.text) from exc

        if not isinstance(payload_raw, dict):
            raise ShyftAPIError("Shyft API returned unexpected payload type", payload=payload_raw)

        payload: dict[str, Any] = payload_raw
        if payload.get("success") is False:
            raise ShyftAPIError(
                str(payload.get("message") or "Shyft API error"), status_code=response.status_code, payload=payload
            )
        if "result" not in payload:
            raise ShyftAPIError("Shyft API response is missing 'result'", payload=payload)

        return payload


__all__ = ["ShyftAPIError", "ShyftRestClient"]
