import pytest

from ocaml_string_convert import TranscoderConfig
from ocaml_string_convert.config import CODEC_ENV_VAR, STRICT_UNITS_ENV_VAR, parse_flag


class TestTranscoderConfig:

    def test_defaults(self):
        config = TranscoderConfig()
        assert config.codec_name == "builtin"
        assert config.strict_units is False

    def test_empty_codec_name_rejected(self):
        with pytest.raises(ValueError):
            TranscoderConfig(codec_name="")

    def test_from_env_defaults(self):
        assert TranscoderConfig.from_env({}) == TranscoderConfig()

    def test_from_env_values(self):
        config = TranscoderConfig.from_env({
            CODEC_ENV_VAR: " lookup ",
            STRICT_UNITS_ENV_VAR: "No",
        })
        assert config == TranscoderConfig(codec_name="lookup", strict_units=False)

    def test_from_env_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(STRICT_UNITS_ENV_VAR, "1")
        assert TranscoderConfig.from_env().strict_units is True

    def test_from_env_bad_flag(self):
        with pytest.raises(ValueError, match=STRICT_UNITS_ENV_VAR):
            TranscoderConfig.from_env({STRICT_UNITS_ENV_VAR: "maybe"})


@pytest.mark.parametrize("value,expected", [
    ("1", True), ("TRUE", True), ("yes", True), ("on", True),
    ("0", False), ("false", False), ("No", False), (" off ", False),
])
def test_parse_flag(value, expected):
    assert parse_flag("X", value) is expected
