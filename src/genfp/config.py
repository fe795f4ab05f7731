"""Runtime settings for the genfp package.

Settings only drive the ambient concerns of the package (logging). None of
them change the behaviour of the sequence operations in
:mod:`genfp.functional`. Only ``GENFP_*`` variables are read.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from genfp.core.types import LogLevel

__all__ = ["Settings", "settings", "load_settings", "DEFAULT_LOG_FORMAT"]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    log_level: LogLevel = Field(
        default="INFO", description="Level name for the package logger."
    )
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT, description="logging.Formatter format string."
    )

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from ``GENFP_LOG_LEVEL`` and ``GENFP_LOG_FORMAT``.

        Args:
            environ: Mapping to read instead of ``os.environ`` (mainly for tests).

        Returns:
            A validated ``Settings`` instance.

        Raises:
            pydantic.ValidationError: If the level is not a standard level name.
        """
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get("GENFP_LOG_LEVEL")
        if level:
            values["log_level"] = level
        log_format = environ.get("GENFP_LOG_FORMAT")
        if log_format:
            values["log_format"] = log_format

        return cls(**values)


def load_settings(environ: Optional[dict] = None) -> Settings:
    """Load settings, falling back to the defaults when the environment is invalid.

    An invalid value is reported as a warning and never stops the package from
    importing.
    """
    try:
        return Settings.load(environ)
    except ValidationError as e:
        logging.getLogger("genfp.config").warning(
            "Ignoring invalid genfp settings from the environment, using defaults: %s",
            e,
        )
        return Settings()


settings = load_settings()
