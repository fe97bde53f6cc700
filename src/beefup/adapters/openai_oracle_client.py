"""OpenAI Responses API client for text completion."""

import logging
from dataclasses import dataclass

from openai import AsyncOpenAI, AuthenticationError, OpenAIError

from beefup.domain.errors import ConfigurationError, OracleError
from beefup.services.oracle import OracleClient, OutputShape

_logger = logging.getLogger(__name__)

_MISSING_KEY_MESSAGE = "API key missing. Please set OPENAI_API_KEY in .env"


@dataclass
class OpenAIOracleClient(OracleClient):
    """Oracle client backed by the OpenAI Responses API."""

    client: AsyncOpenAI | None
    model: str
    reasoning_effort: str | None = None
    store: bool = False

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        api_key: str | None,
        *,
        model: str,
        reasoning_effort: str | None = None,
        store: bool = False,
        timeout_seconds: float = 20.0,
    ) -> "OpenAIOracleClient":
        """Create a client; a missing key only fails once a call is made."""
        client = (
            AsyncOpenAI(api_key=api_key, timeout=timeout_seconds, max_retries=0)
            if api_key
            else None
        )
        return cls(
            client=client,
            model=model,
            reasoning_effort=reasoning_effort,
            store=store,
        )

    async def complete(self, prompt: str, shape: OutputShape | None = None) -> str:
        """Call the Responses API, requesting structured output when shaped."""
        if self.client is None:
            raise ConfigurationError(_MISSING_KEY_MESSAGE)
        request_payload: dict[str, object] = {
            "model": self.model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "store": self.store,
        }
        if shape is not None:
            request_payload["text"] = {
                "format": {
                    "type": "json_schema",
                    "name": "oracle_answer",
                    "strict": shape.is_strict,
                    "schema": shape.to_json_schema(),
                }
            }
        if self.reasoning_effort:
            request_payload["reasoning"] = {"effort": self.reasoning_effort}

        try:
            response = await self.client.responses.create(**request_payload)
        except AuthenticationError as exc:
            raise ConfigurationError("OpenAI rejected the API key") from exc
        except OpenAIError as exc:
            _logger.warning("OpenAI request failed: %s", exc)
            raise OracleError("OpenAI request failed") from exc
        output_text = response.output_text
        if not output_text:
            raise OracleError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self.client is not None:
            await self.client.close()
