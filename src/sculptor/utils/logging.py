"""Logging utilities for Sculptor."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class SculptStats:
    """Statistics accumulated over a sculpt stroke."""

    steps: int = 0
    idle_steps: int = 0
    pushed_count: int = 0
    inserted_count: int = 0
    merged_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate stroke duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def net_vertex_change(self) -> int:
        return self.inserted_count - self.merged_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

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

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("sculptor")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SculptLogger:
    """Logger for tracking sculpting steps and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SculptStats()

    def log_stroke_start(self, cursor: tuple[float, float], radius_model: float, radius_display: float) -> None:
        """Log start of a sculpt stroke."""
        self._logger.debug(
            "Stroke started",
            cursor=cursor,
            radius_model=round(radius_model, 3),
            radius_display=round(radius_display, 3),
        )

    def log_step(
        self,
        cursor: tuple[float, float],
        pushed: int,
        inserted: int,
        merged: int,
        length: int,
    ) -> None:
        """Log a sculpt step that moved at least one vertex."""
        self._logger.debug(
            "Sculpt step",
            cursor=cursor,
            pushed=pushed,
            inserted=inserted,
            merged=merged,
            length=length,
        )
        self._stats.steps += 1
        self._stats.pushed_count += pushed
        self._stats.inserted_count += inserted
        self._stats.merged_count += merged

    def log_idle_step(self, cursor: tuple[float, float]) -> None:
        """Log a sculpt step that touched no vertex."""
        self._logger.debug("Sculpt step idle", cursor=cursor)
        self._stats.steps += 1
        self._stats.idle_steps += 1

    def log_stroke_complete(self, length: int, duration_ms: float) -> None:
        """Log end of a sculpt stroke."""
        self._logger.info(
            "Stroke complete",
            steps=self._stats.steps,
            inserted=self._stats.inserted_count,
            merged=self._stats.merged_count,
            length=length,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> SculptStats:
        """Get current sculpting statistics."""
        return self._stats
