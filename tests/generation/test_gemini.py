import pytest
from unittest.mock import MagicMock, patch

from Mai.config import Settings
from Mai.exceptions import GenerationError
from Mai.generation.gemini import GeminiClient


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", llm_retries=2, llm_retry_delay_base_s=0)


def _response(text, block_reason=None):
    response = MagicMock()
    response.text = text
    response.prompt_feedback = MagicMock(block_reason=block_reason) if block_reason else None
    return response


def test_generate_json_parses_response(settings):
    with patch("Mai.generation.gemini.genai.Client") as mock_client_cls:
        mock_client_cls.return_value.models.generate_content.return_value = _response(
            '{"H": "h", "P": "p", "F": ["a", "b"]}'
        )
        data = GeminiClient(settings).generate_json("system", "user")

    assert data == {"H": "h", "P": "p", "F": ["a", "b"]}
    mock_client_cls.assert_called_once_with(api_key="test-key")
    kwargs = mock_client_cls.return_value.models.generate_content.call_args.kwargs
    assert kwargs["model"] == settings.model_name
    assert kwargs["contents"] == "user"
    assert kwargs["config"].response_mime_type == "application/json"


def test_generate_json_retries_then_succeeds(settings):
    with patch("Mai.generation.gemini.genai.Client") as mock_client_cls, \
         patch("Mai.generation.gemini.time.sleep") as mock_sleep:
        mock_client_cls.return_value.models.generate_content.side_effect = [
            RuntimeError("503"),
            _response('{"H": "h", "P": "p", "F": []}'),
        ]
        data = GeminiClient(settings).generate_json("system", "user")

    assert data["H"] == "h"
    assert mock_sleep.call_count == 1


def test_generate_json_gives_up_after_retries(settings):
    with patch("Mai.generation.gemini.genai.Client") as mock_client_cls, \
         patch("Mai.generation.gemini.time.sleep"):
        mock_client_cls.return_value.models.generate_content.side_effect = RuntimeError("boom")
        with pytest.raises(GenerationError):
            GeminiClient(settings).generate_json("system", "user")
        assert mock_client_cls.return_value.models.generate_content.call_count == 2


@pytest.mark.parametrize("response", [
    _response("not json"),
    _response("[1, 2]"),
    _response(""),
    _response('{"H": "h"}', block_reason="SAFETY"),
])
def test_unusable_responses_raise(settings, response):
    with patch("Mai.generation.gemini.genai.Client") as mock_client_cls:
        mock_client_cls.return_value.models.generate_content.return_value = response
        with pytest.raises(GenerationError):
            GeminiClient(settings).generate_json("system", "user")


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    client = GeminiClient(Settings(gemini_api_key=None))
    with pytest.raises(GenerationError):
        client.generate_json("system", "user")
