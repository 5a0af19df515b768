import pytest

from ocaml_string_convert import Transcoder, TranscoderConfig, reset_default_transcoder
from ocaml_string_convert.config import CODEC_ENV_VAR, STRICT_UNITS_ENV_VAR
from ocaml_string_convert.providers import MockUTF8Codec


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Every test starts from default config and a fresh default transcoder."""
    monkeypatch.delenv(CODEC_ENV_VAR, raising=False)
    monkeypatch.delenv(STRICT_UNITS_ENV_VAR, raising=False)
    reset_default_transcoder()
    yield
    reset_default_transcoder()


@pytest.fixture
def transcoder():
    return Transcoder()


@pytest.fixture
def strict_transcoder():
    return Transcoder(config=TranscoderConfig(strict_units=True))


@pytest.fixture
def mock_codec():
    return MockUTF8Codec()
