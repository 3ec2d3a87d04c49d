"""Logging utilities for Bitmapsdf."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    rendered_count: int = 0
    filled_count: int = 0
    unchanged_count: int = 0
    intersection_count: int = 0
    edge_count: int = 0
    warnings: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def duration_ms(self) -> float:
        return self.duration_seconds * 1000


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bitmapsdf")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ConversionLogger:
    """Logger for tracking per-channel outcomes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_channel_start(self, channel: str, offset: int) -> None:
        """Log start of channel processing."""
        self._logger.debug("Processing channel", channel=channel, offset=offset)

    def log_channel_rendered(
        self,
        channel: str,
        intersections: int,
        edges: int,
        duration_ms: float,
    ) -> None:
        """Log a channel converted to a distance field."""
        self._logger.info(
            "Channel rendered",
            channel=channel,
            intersections=intersections,
            edges=edges,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.intersection_count += intersections
        self._stats.edge_count += edges

    def log_channel_filled(self, channel: str, value: int, reason: str) -> None:
        """Log a channel stamped with a constant."""
        self._logger.debug("Channel filled", channel=channel, value=value, reason=reason)
        self._stats.filled_count += 1

    def log_channel_unchanged(self, channel: str, reason: str) -> None:
        """Log a channel left untouched."""
        self._logger.warning("Channel left unchanged", channel=channel, reason=reason)
        self._stats.unchanged_count += 1
        self._stats.warnings.append((channel, reason))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
