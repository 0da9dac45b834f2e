from unittest import mock

import pytest
import requests

from api.openai_client import OpenAICompletionClient


@pytest.fixture
def client(settings):
    settings.OPENAI_API_KEY = "sk-test"
    settings.OPENAI_BASE_URL = "https://llm.example.com/v1/"
    settings.OPENAI_MODEL = "gpt-4o"
    return OpenAICompletionClient()


def completion_response(content):
    response = mock.Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"choices": [{"message": {"role": "assistant", "content": content}}]}
    return response


def test_translate_returns_trimmed_content(client):
    with mock.patch("api.openai_client.requests.post", return_value=completion_response("  Hello  \n")) as post:
        assert client.translate("Translate to English:", "Hallo") == "Hello"

    post.assert_called_once()
    args, kwargs = post.call_args
    assert args[0] == "https://llm.example.com/v1/chat/completions"
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["json"] == {
        "model": "gpt-4o",
        "messages": [
            {"role": "system", "content": "Translate to English:"},
            {"role": "user", "content": "Hallo"},
        ],
        "temperature": 0.7,
    }


def test_translate_returns_original_on_network_error(client):
    with mock.patch("api.openai_client.requests.post", side_effect=requests.ConnectionError("boom")):
        assert client.translate("prompt", "Bonjour") == "Bonjour"


def test_translate_returns_original_on_auth_error(client):
    response = mock.Mock()
    response.raise_for_status.side_effect = requests.HTTPError("401 Client Error: Unauthorized")
    with mock.patch("api.openai_client.requests.post", return_value=response):
        assert client.translate("prompt", "Hola") == "Hola"


@pytest.mark.parametrize("payload", [
    {},
    {"choices": []},
    {"choices": [{"message": {}}]},
    {"choices": [{"message": {"content": None}}]},
])
def test_translate_returns_original_on_malformed_response(client, payload):
    response = mock.Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    with mock.patch("api.openai_client.requests.post", return_value=response):
        assert client.translate("prompt", "Ciao") == "Ciao"


def test_translate_returns_original_on_invalid_json(client):
    response = mock.Mock()
    response.raise_for_status.return_value = None
    response.json.side_effect = ValueError("Expecting value")
    with mock.patch("api.openai_client.requests.post", return_value=response):
        assert client.translate("prompt", "Hej") == "Hej"
