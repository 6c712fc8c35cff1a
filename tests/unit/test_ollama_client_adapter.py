import json

import httpx
import pytest

from resume_intake.enhancement.exceptions import EnhancementError, EnhancementNetworkError
from resume_intake.enhancement.ollama_client_adapter import OllamaClientAdapter


def _adapter(handler: httpx.MockTransport) -> OllamaClientAdapter:
    return OllamaClientAdapter(
        base_url="http://ollama.test/", timeout_seconds=5, transport=handler
    )


def _complete(adapter: OllamaClientAdapter) -> str:
    return adapter.complete(model="llama3.2:latest", temperature=0.1, prompt="clean this")


class TestOllamaClientAdapter:
    def test_returns_response_text(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"response": "cleaned", "done": True})

        assert _complete(_adapter(httpx.MockTransport(handler))) == "cleaned"
        body = json.loads(seen[0].content)
        assert seen[0].url.path == "/api/generate"
        assert body["model"] == "llama3.2:latest"
        assert body["prompt"] == "clean this"
        assert body["stream"] is False
        assert body["options"] == {"temperature": 0.1}

    def test_bad_status_raises_network_error(self) -> None:
        adapter = _adapter(httpx.MockTransport(lambda r: httpx.Response(500)))
        with pytest.raises(EnhancementNetworkError, match="HTTP 500"):
            _complete(adapter)

    def test_connection_error_raises_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(EnhancementNetworkError, match="network error"):
            _complete(_adapter(httpx.MockTransport(handler)))

    def test_timeout_raises_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(EnhancementNetworkError, match="network error"):
            _complete(_adapter(httpx.MockTransport(handler)))

    def test_invalid_json_raises_error(self) -> None:
        adapter = _adapter(httpx.MockTransport(lambda r: httpx.Response(200, text="{not json")))
        with pytest.raises(EnhancementError, match="Invalid JSON"):
            _complete(adapter)

    @pytest.mark.parametrize("payload", [{"done": True}, {"response": 42}, ["response"]])
    def test_missing_response_text_raises_error(self, payload: object) -> None:
        adapter = _adapter(httpx.MockTransport(lambda r: httpx.Response(200, json=payload)))
        with pytest.raises(EnhancementError, match="no 'response' text"):
            _complete(adapter)

    def test_close_releases_http_client(self) -> None:
        adapter = _adapter(httpx.MockTransport(lambda r: httpx.Response(200, json={})))
        adapter.close()
        assert adapter._client.is_closed
