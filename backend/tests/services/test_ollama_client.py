"""Ollama Client — request payload and error mapping over httpx.MockTransport.

Tests cover:
    - Payload: model, prompt, stream=false, sampling options, stop sequences
    - Flat and nested envelopes reduced to text
    - Non-JSON body returned as raw text
    - HTTP error status and transport failures -> GenerationAPIError
"""

import json

import httpx
import pytest

from app.core.errors import GenerationAPIError
from app.infrastructure.ollama_client import GenerationParameters, OllamaClient


def _client(handler) -> OllamaClient:
    return OllamaClient(
        base_url="http://ollama.test",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_sends_generation_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"response": "🎨,Monet"})

    client = _client(handler)
    assert await client.generate("Kombiniere") == "🎨,Monet"
    await client.aclose()

    body = seen["body"]
    assert seen["path"] == "/api/generate"
    assert body["model"] == "gemma2:9b"
    assert body["prompt"] == "Kombiniere"
    assert body["stream"] is False
    assert body["options"]["seed"] == 42
    assert body["options"]["temperature"] == 0.1
    assert body["options"]["num_predict"] == 20
    assert "\n" in body["options"]["stop"]


@pytest.mark.asyncio
async def test_custom_parameters_used():
    seen = {}

    def handler(request):
        seen.update(json.loads(request.content))
        return httpx.Response(200, json={"response": ""})

    client = OllamaClient(
        base_url="http://ollama.test",
        parameters=GenerationParameters(model="llama3", seed=7),
        transport=httpx.MockTransport(handler),
    )
    assert await client.generate("p") == ""
    assert seen["model"] == "llama3"
    assert seen["options"]["seed"] == 7


@pytest.mark.asyncio
async def test_nested_envelope_decoded():
    client = _client(lambda r: httpx.Response(
        200, json={"choices": [{"content": [{"text": "🌊,"}, {"text": "Wasser"}]}]},
    ))
    assert await client.generate("p") == "🌊,Wasser"


@pytest.mark.asyncio
async def test_unknown_envelope_yields_empty_text():
    client = _client(lambda r: httpx.Response(200, json={"answer": "🎨,Monet"}))
    assert await client.generate("p") == ""


@pytest.mark.asyncio
async def test_non_json_body_returned_raw():
    client = _client(lambda r: httpx.Response(200, text="🎨,Monet"))
    assert await client.generate("p") == "🎨,Monet"


@pytest.mark.asyncio
async def test_http_error_status_raises():
    client = _client(lambda r: httpx.Response(500, json={"error": "model not loaded"}))
    with pytest.raises(GenerationAPIError) as exc_info:
        await client.generate("p")
    assert exc_info.value.status_code == 500
    assert exc_info.value.api_error_type == "http_status"


@pytest.mark.asyncio
async def test_connection_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GenerationAPIError) as exc_info:
        await _client(handler).generate("p")
    assert exc_info.value.api_error_type == "connection_error"


@pytest.mark.asyncio
async def test_timeout_raises_timeout_error():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(GenerationAPIError) as exc_info:
        await _client(handler).generate("p")
    assert exc_info.value.api_error_type == "timeout"
