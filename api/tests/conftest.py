from types import SimpleNamespace

import pytest


class EchoClient:
    """Deterministic stand-in for the completion client."""

    def __init__(self, prefix="EN:"):
        self.prefix = prefix
        self.calls = []

    def translate(self, system_prompt, text):
        self.calls.append((system_prompt, text))
        return f"{self.prefix} {text}"


class PassThroughClient:
    """Behaves like the real client when every remote call fails."""

    def __init__(self):
        self.calls = []

    def translate(self, system_prompt, text):
        self.calls.append((system_prompt, text))
        return text


@pytest.fixture
def folders(settings, tmp_path):
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    input_dir.mkdir()
    prompt_file = tmp_path / "prompt.txt"
    settings.TRANSLATOR_INPUT_FOLDER = str(input_dir)
    settings.TRANSLATOR_OUTPUT_FOLDER = str(output_dir)
    settings.TRANSLATOR_PROMPT_FILE = str(prompt_file)
    return SimpleNamespace(input=input_dir, output=output_dir, prompt=prompt_file)


@pytest.fixture
def echo_client():
    return EchoClient()


@pytest.fixture
def failing_client():
    return PassThroughClient()
