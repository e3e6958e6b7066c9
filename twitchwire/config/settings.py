from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    TWITCHWIRE_LOG_DECODE_ERRORS,
    TWITCHWIRE_LOG_RAW_LINES,
    TWITCHWIRE_MAX_LINE_LENGTH,
    TWITCHWIRE_MIN_LINE_LENGTH_LIMIT,
    _get_env_bool,
    _get_env_int,
)
from ..logs.logger import logger


class DecoderSettings(BaseModel):
    """Tunables of the stream layer.

    The pure decoding functions take no configuration; these settings only
    shape how ``LineBuffer``, ``iter_decode`` and ``adecode`` treat a stream.

    Attributes:
        max_line_length: Longest accepted line in bytes, tags included.
        log_raw_lines: Emit each raw line at DEBUG level.
        log_decode_errors: Report per-line failures through the error log.
        strip_line_endings: Remove a trailing CR/LF before decoding.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_line_length: int = Field(
        default=TWITCHWIRE_MAX_LINE_LENGTH, ge=TWITCHWIRE_MIN_LINE_LENGTH_LIMIT
    )
    log_raw_lines: bool = TWITCHWIRE_LOG_RAW_LINES
    log_decode_errors: bool = TWITCHWIRE_LOG_DECODE_ERRORS
    strip_line_endings: bool = True

    @classmethod
    def from_env(cls) -> DecoderSettings:
        """Build settings from the ``TWITCHWIRE_*`` environment variables.

        The variables are read at call time; unset or invalid ones fall back
        to the defaults in ``constants``.
        """
        settings = cls(
            max_line_length=_get_env_int(
                "TWITCHWIRE_MAX_LINE_LENGTH", TWITCHWIRE_MAX_LINE_LENGTH
            ),
            log_raw_lines=_get_env_bool("TWITCHWIRE_LOG_RAW_LINES", TWITCHWIRE_LOG_RAW_LINES),
            log_decode_errors=_get_env_bool(
                "TWITCHWIRE_LOG_DECODE_ERRORS", TWITCHWIRE_LOG_DECODE_ERRORS
            ),
        )
        logger.log_event(
            "config",
            "loaded",
            level=logging.DEBUG,
            max_line_length=settings.max_line_length,
        )
        return settings

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DecoderSettings:
        """Create settings from a dictionary, validating every field.

        Raises:
            pydantic.ValidationError: If a value is out of range or unknown.
        """
        return cls.model_validate(dict(data))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


__all__ = ["DecoderSettings"]
