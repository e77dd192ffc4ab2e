"""
Channel-Aware Structured Logging for RSV.

Provides semantic logging channels with level-based filtering:
- CATALOG: schema definition loading, record registration
- TRAVERSAL: worklist load/drain, record unfolding
- CHECK: scalar, rule and required-field checks
- SYSTEM: errors, warnings, status

Log Levels:
- SILENT (0): No logging
- INFO (1): Key milestones only
- VERBOSE (2): Detailed operations
- DEBUG (3): Everything

Configuration via environment:
- RSV_LOG_LEVEL: Global level (silent/info/verbose/debug)
- RSV_LOG_FORMAT: Output format (console/json)
- RSV_LOG_CHANNELS: Comma-separated channel filter (all if not set)
"""

import logging
import os
import sys
from datetime import datetime
from enum import IntEnum, Enum
from typing import Any, Optional, Union
from contextvars import ContextVar

import structlog


# =============================================================================
# Enums
# =============================================================================

class LogLevel(IntEnum):
    """Log verbosity levels."""
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def from_string(cls, s: str) -> "LogLevel":
        """Parse log level from string."""
        mapping = {
            "silent": cls.SILENT,
            "info": cls.INFO,
            "verbose": cls.VERBOSE,
            "debug": cls.DEBUG,
            # stdlib compatibility
            "warning": cls.INFO,
            "error": cls.INFO,
        }
        return mapping.get(s.lower(), cls.INFO)


class LogChannel(str, Enum):
    """Semantic log channels."""
    CATALOG = "CATALOG"       # Schema catalog loading
    TRAVERSAL = "TRAVERSAL"   # Worklist load and drain
    CHECK = "CHECK"           # Leaf and required-field checks
    SYSTEM = "SYSTEM"         # Errors, warnings, status

    @classmethod
    def all(cls) -> list["LogChannel"]:
        """Return all channels."""
        return list(cls)

    @classmethod
    def from_string(cls, s: str) -> Optional["LogChannel"]:
        """Parse channel from string."""
        try:
            return cls(s.upper())
        except ValueError:
            return None


# =============================================================================
# Configuration
# =============================================================================

# Context variable for run-scoped logging
_run_context: ContextVar[dict] = ContextVar("rsv_log_context", default={})

# Global configuration
_config = {
    "level": LogLevel.INFO,
    "format": "console",
    "channels": set(LogChannel.all()),
    "configured": False,
}


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    format: str = None,
    channels: list[Union[LogChannel, str]] = None,
    force: bool = False,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Log level (LogLevel enum or string)
        format: Output format ("console" or "json")
        channels: List of channels to enable (all if None)
        force: Force reconfiguration if already configured
    """
    global _config

    if _config["configured"] and not force:
        return

    if level is None:
        level_str = os.environ.get("RSV_LOG_LEVEL", "info")
        level = LogLevel.from_string(level_str)
    elif isinstance(level, str):
        level = LogLevel.from_string(level)

    if format is None:
        format = os.environ.get("RSV_LOG_FORMAT", "console")

    if channels is None:
        channels_str = os.environ.get("RSV_LOG_CHANNELS", "")
        channels = _parse_channels(channels_str.split(",")) if channels_str else None
        channels = channels or LogChannel.all()
    else:
        channels = _parse_channels(channels)

    _config["level"] = level
    _config["format"] = format
    _config["channels"] = set(channels)

    stdlib_level = {
        LogLevel.SILENT: logging.CRITICAL + 10,  # Above critical = nothing
        LogLevel.INFO: logging.INFO,
        LogLevel.VERBOSE: logging.DEBUG,
        LogLevel.DEBUG: logging.DEBUG,
    }.get(level, logging.INFO)

    # Diagnostics go to stderr so stdout stays free for reports
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=stdlib_level,
        force=True,
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _config["configured"] = True


def _parse_channels(values: list[Union[LogChannel, str]]) -> list[LogChannel]:
    parsed_channels = []
    for ch in values:
        if isinstance(ch, LogChannel):
            parsed_channels.append(ch)
            continue
        parsed = LogChannel.from_string(ch.strip())
        if parsed:
            parsed_channels.append(parsed)
    return parsed_channels


# =============================================================================
# Channel Logger
# =============================================================================

class ChannelLogger:
    """
    A structlog logger bound to one channel.

    info() and verbose() respect the configured level and channel filter;
    error() and warning() are emitted on every channel unless SILENT.
    """

    def __init__(self, channel: LogChannel):
        self.channel = channel
        self._logger = structlog.get_logger(f"rsv.{channel.value.lower()}")

    def enabled(self, msg_level: LogLevel) -> bool:
        if self.channel not in _config["channels"]:
            return False
        return _config["level"] >= msg_level

    def _event(self, **kwargs) -> dict:
        return {"channel": self.channel.value, **kwargs, **_run_context.get()}

    def info(self, event: str, **kwargs) -> None:
        if self.enabled(LogLevel.INFO):
            self._logger.info(event, **self._event(**kwargs))

    def verbose(self, event: str, **kwargs) -> None:
        if self.enabled(LogLevel.VERBOSE):
            self._logger.debug(event, **self._event(verbosity="verbose", **kwargs))

    def error(self, event: str, **kwargs) -> None:
        if _config["level"] != LogLevel.SILENT:
            self._logger.error(event, **self._event(**kwargs))

    def warning(self, event: str, **kwargs) -> None:
        if _config["level"] != LogLevel.SILENT:
            self._logger.warning(event, **self._event(**kwargs))


def get_logger(channel: LogChannel = LogChannel.SYSTEM) -> ChannelLogger:
    """Get a logger for a channel, configuring from the environment on first use."""
    configure_logging()
    return ChannelLogger(channel)


# =============================================================================
# Run Context Management
# =============================================================================

def bind_run_context(**kwargs) -> None:
    """Bind context that will be included in all log messages."""
    ctx = _run_context.get().copy()
    ctx.update(kwargs)
    _run_context.set(ctx)


def clear_run_context() -> None:
    """Clear the run context."""
    _run_context.set({})


class RunLogger:
    """
    Context-aware logger for a single validation run.

    Binds the run id and root record name for every message logged
    while the run is in progress.
    """

    def __init__(self, run_id: str, root: str):
        self.run_id = run_id
        self.root = root
        self._traversal_log = get_logger(LogChannel.TRAVERSAL)
        self._start_time = datetime.now()
        bind_run_context(run_id=run_id, root=root)

    def run_started(self) -> None:
        self._traversal_log.verbose("run_started")

    def record_unfolded(self, record: str, instances: int) -> None:
        """Log a record whose instances were pushed onto the worklist."""
        self._traversal_log.verbose(
            "record_unfolded",
            record=record,
            instances=instances,
        )

    def run_failed(self, error: Exception) -> None:
        self._traversal_log.error(
            "run_aborted",
            error=str(error),
            error_type=type(error).__name__,
        )

    def run_complete(self, valid: bool, **metrics: Any) -> None:
        """Log run completion with summary, then drop the run context."""
        total_ms = (datetime.now() - self._start_time).total_seconds() * 1000

        self._traversal_log.info(
            "run_complete",
            valid=valid,
            total_duration_ms=round(total_ms, 2),
            **metrics,
        )
        clear_run_context()
