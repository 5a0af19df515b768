"""
Transcoder Configuration

Frozen settings for a Transcoder, optionally read from the environment.

ENVIRONMENT:
- OCAML_STRING_CONVERT_CODEC: registered codec name (default "builtin")
- OCAML_STRING_CONVERT_STRICT_UNITS: reject units above 255 (default off)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import os


CODEC_ENV_VAR = "OCAML_STRING_CONVERT_CODEC"
STRICT_UNITS_ENV_VAR = "OCAML_STRING_CONVERT_STRICT_UNITS"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_flag(name: str, value: str) -> bool:
    """Parse a boolean environment value or raise ValueError."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


@dataclass(frozen=True)
class TranscoderConfig:
    """
    Configuration for a Transcoder.

    WHY FROZEN:
    The codec capability is acquired once from this config and never
    swapped afterwards. Changes require a new Transcoder.
    """
    codec_name: str = "builtin"

    # Units above 255: keep the low byte, or raise CarrierRangeError (strict)
    strict_units: bool = False

    def __post_init__(self):
        if not self.codec_name or not isinstance(self.codec_name, str):
            raise ValueError("codec_name must be a non-empty string")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> TranscoderConfig:
        """Build config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        codec_name = env.get(CODEC_ENV_VAR, "builtin").strip()
        strict_raw = env.get(STRICT_UNITS_ENV_VAR)
        strict_units = False
        if strict_raw is not None:
            strict_units = parse_flag(STRICT_UNITS_ENV_VAR, strict_raw)

        return cls(codec_name=codec_name, strict_units=strict_units)
