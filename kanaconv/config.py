"""Runtime settings read from the environment (and an optional ``.env`` file)."""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from kanaconv.nlp.base import SegmentationMode

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: Tuple[str, ...] = field(default=("*",))
    segmentation_mode: SegmentationMode = SegmentationMode.SEARCH
    user_dictionary: Optional[str] = None
    normalize_halfwidth: bool = True
    log_level: str = "INFO"


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"KANACONV_PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"KANACONV_PORT out of range: {port}")
    return port


def load_settings() -> Settings:
    """Build :class:`Settings` from ``KANACONV_*`` environment variables.

    Raises:
        ValueError: If a variable is set to something that cannot be parsed.
    """
    defaults = Settings()

    origins = os.getenv("KANACONV_CORS_ORIGINS")
    if origins is not None:
        cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip()) or defaults.cors_origins
    else:
        cors_origins = defaults.cors_origins

    mode = os.getenv("KANACONV_SEGMENTATION_MODE")
    try:
        segmentation_mode = SegmentationMode(mode.strip().lower()) if mode else defaults.segmentation_mode
    except ValueError:
        raise ValueError(f"KANACONV_SEGMENTATION_MODE must be 'search' or 'normal', got {mode!r}") from None

    port = os.getenv("KANACONV_PORT")
    halfwidth = os.getenv("KANACONV_NORMALIZE_HALFWIDTH")

    return Settings(
        host=os.getenv("KANACONV_HOST", defaults.host),
        port=_parse_port(port) if port else defaults.port,
        cors_origins=cors_origins,
        segmentation_mode=segmentation_mode,
        user_dictionary=os.getenv("KANACONV_USER_DICTIONARY") or None,
        normalize_halfwidth=(
            _parse_bool("KANACONV_NORMALIZE_HALFWIDTH", halfwidth) if halfwidth else defaults.normalize_halfwidth
        ),
        log_level=os.getenv("KANACONV_LOG_LEVEL", defaults.log_level).upper(),
    )
