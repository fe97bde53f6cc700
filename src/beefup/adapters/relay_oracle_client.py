"""Oracle client that goes through a server-side relay endpoint."""

import logging
from dataclasses import dataclass

import httpx

from beefup.domain.errors import OracleError
from beefup.services.oracle import OracleClient, OutputShape

_logger = logging.getLogger(__name__)


@dataclass
class RelayOracleClient(OracleClient):
    """HTTPX-backed client for the relay endpoint.

    The relay holds the provider credential, so this client never sees one.
    """

    relay_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 20.0

    @classmethod
    def create(
        cls, relay_url: str, timeout_seconds: float = 20.0
    ) -> "RelayOracleClient":
        """Create a relay client with a managed httpx session."""
        return cls(
            relay_url=relay_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def complete(self, prompt: str, shape: OutputShape | None = None) -> str:
        """POST the prompt and schema to the relay and return its text."""
        payload = {
            "prompt": prompt,
            "schema": shape.to_json_schema() if shape is not None else None,
        }
        try:
            response = await self.http_client.post(
                self.relay_url,
                json=payload,
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            _logger.warning("Relay request failed: %s", exc)
            raise OracleError("Relay request failed") from exc

        data = _json_or_empty(response)
        if response.status_code != httpx.codes.OK:
            error = data.get("error") or f"Relay returned {response.status_code}"
            _logger.warning("Relay error (status=%s): %s", response.status_code, error)
            raise OracleError(str(error))
        text = data.get("text")
        if not isinstance(text, str) or not text:
            raise OracleError("Relay returned no text")
        return text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _json_or_empty(response: httpx.Response) -> dict[str, object]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
