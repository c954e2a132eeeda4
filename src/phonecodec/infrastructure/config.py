"""Settings from environment variables, with .env loaded from the repo root or the working directory."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

from phonecodec.application.parsers import (
    DEFAULT_PARSER,
    LenientPhoneNumberParser,
    NationalPhoneNumberParser,
)
from phonecodec.application.ports import PhoneNumberParser
from phonecodec.domain import ConfigurationError, get_grammar

logger = logging.getLogger(__name__)

# Repo root: from src/phonecodec/infrastructure/config.py go up four levels
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class DecodeMode(Enum):
    STRICT = "strict"  # international numbers only; anything else is a wire format error
    LENIENT = "lenient"  # unparseable text decodes to an absent number keeping the raw text
    NATIONAL = "national"  # national numbers resolved with default_region


@dataclass(frozen=True)
class Settings:
    decode_mode: DecodeMode = DecodeMode.STRICT
    default_region: str | None = None
    serialize_nulls: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.decode_mode is DecodeMode.NATIONAL and not get_grammar().is_supported_region(self.default_region):
            raise ConfigurationError(
                f"Decode mode 'national' needs a supported PHONECODEC_DEFAULT_REGION, got {self.default_region!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown LOG_LEVEL: {self.log_level!r}")

    def make_parser(self) -> PhoneNumberParser:
        if self.decode_mode is DecodeMode.LENIENT:
            return LenientPhoneNumberParser()
        if self.decode_mode is DecodeMode.NATIONAL:
            return NationalPhoneNumberParser(self.default_region)
        return DEFAULT_PARSER


def load_dotenv_file() -> Path | None:
    """Load .env from the repo root or the current dir; returns the file used."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Read settings from env, or from os.environ after loading .env."""
    if env is None:
        path = load_dotenv_file()
        if path is not None:
            logger.debug("Loaded environment from %s", path)
        env = os.environ
    mode_text = env.get("PHONECODEC_DECODE_MODE", DecodeMode.STRICT.value).strip().lower()
    try:
        decode_mode = DecodeMode(mode_text)
    except ValueError:
        raise ConfigurationError(f"Unknown PHONECODEC_DECODE_MODE: {mode_text!r}") from None
    region = env.get("PHONECODEC_DEFAULT_REGION", "").strip().upper() or None
    return Settings(
        decode_mode=decode_mode,
        default_region=region,
        serialize_nulls=_parse_bool("PHONECODEC_SERIALIZE_NULLS", env.get("PHONECODEC_SERIALIZE_NULLS", "")),
        log_level=env.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def _parse_bool(name: str, text: str) -> bool:
    value = text.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {text!r}")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level.upper())
