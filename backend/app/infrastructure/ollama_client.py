"""Ollama Client — single-call wrapper around a local /api/generate endpoint.

Invariants:
    - Every call is bounded by an explicit timeout (no hanging requests)
    - Transport errors, timeouts and non-2xx statuses are mapped to GenerationAPIError
    - A 2xx body that is not JSON is returned as raw generated text
    - A JSON body is reduced to text via extract_generated_text; "" when no
      known envelope shape matches
    - No retries here: the caller owns the attempt loop

Design Decisions:
    - httpx.AsyncClient kept open for the app lifetime and closed on shutdown
    - Sampling parameters sent under "options" (Ollama reads them there, not top-level)
    - Fixed seed and low temperature: the same pair should yield the same label
"""

import logging
from dataclasses import dataclass, field

import httpx

from app.core.errors import GenerationAPIError
from app.schemas.generation import extract_generated_text

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


@dataclass(frozen=True)
class GenerationParameters:
    """Per-call sampling parameters, fixed for every attempt."""
    model: str = "gemma2:9b"
    max_tokens: int = 20
    temperature: float = 0.1
    top_p: float = 0.5
    seed: int = 42
    repeat_penalty: float = 1.1
    stop: tuple[str, ...] = field(default=("\n", "INPUT:", "Beispiel:"))

    def to_payload(self, prompt: str) -> dict:
        return {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "num_predict": self.max_tokens,
                "temperature": self.temperature,
                "top_p": self.top_p,
                "seed": self.seed,
                "repeat_penalty": self.repeat_penalty,
                "stop": list(self.stop),
            },
        }


class OllamaClient:
    """Calls the model server once per generate(); errors become GenerationAPIError."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:11434",
        parameters: GenerationParameters | None = None,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.parameters = parameters or GenerationParameters()
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def generate(self, prompt: str) -> str:
        """Send one generation request and return the generated text."""
        try:
            response = await self.client.post(
                GENERATE_PATH, json=self.parameters.to_payload(prompt),
            )
        except httpx.TimeoutException as e:
            raise GenerationAPIError(str(e) or "request timed out", "timeout")
        except httpx.HTTPError as e:
            raise GenerationAPIError(str(e), "connection_error")

        if response.is_error:
            raise GenerationAPIError(
                f"HTTP {response.status_code}", "http_status",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError:
            logger.debug("Model server returned non-JSON body, using raw text")
            return response.text
        return extract_generated_text(payload) or ""

    async def aclose(self) -> None:
        await self.client.aclose()
