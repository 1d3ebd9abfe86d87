"""
Settings - Environment-driven configuration.

Values are read from the process environment, which the package populates
from a project .env file on import.
"""

import os
import logging
from dataclasses import dataclass

from .render.html_tree import DEFAULT_STYLESHEET, DEFAULT_SCRIPT, DEFAULT_TIME_PRECISION


logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """
    Runtime settings.
    
    Attributes:
        log_level: Logging level name (XDEBUG_TRACE_LOG_LEVEL)
        stylesheet: Stylesheet href in rendered HTML (XDEBUG_TRACE_STYLESHEET)
        script: Script src in rendered HTML (XDEBUG_TRACE_SCRIPT)
        time_precision: Decimals for rendered times (XDEBUG_TRACE_TIME_PRECISION)
    """
    log_level: str = DEFAULT_LOG_LEVEL
    stylesheet: str = DEFAULT_STYLESHEET
    script: str = DEFAULT_SCRIPT
    time_precision: int = DEFAULT_TIME_PRECISION
    
    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from XDEBUG_TRACE_* environment variables."""
        precision = os.getenv("XDEBUG_TRACE_TIME_PRECISION")
        time_precision = DEFAULT_TIME_PRECISION
        if precision:
            try:
                time_precision = int(precision)
            except ValueError:
                logger.warning(
                    f"Ignoring invalid XDEBUG_TRACE_TIME_PRECISION={precision!r}, "
                    f"using {DEFAULT_TIME_PRECISION}"
                )
            else:
                if time_precision < 0:
                    logger.warning(
                        f"Ignoring negative XDEBUG_TRACE_TIME_PRECISION={precision!r}, "
                        f"using {DEFAULT_TIME_PRECISION}"
                    )
                    time_precision = DEFAULT_TIME_PRECISION
        
        return cls(
            log_level=os.getenv("XDEBUG_TRACE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            stylesheet=os.getenv("XDEBUG_TRACE_STYLESHEET", DEFAULT_STYLESHEET),
            script=os.getenv("XDEBUG_TRACE_SCRIPT", DEFAULT_SCRIPT),
            time_precision=time_precision,
        )
