"""Logging utilities for Shapecodec."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from shapecodec.domain import ParsedShape, ShapeSummary

_installed_handlers: list[logging.Handler] = []


@dataclass
class ImportStats:
    """Statistics from one import or export run."""

    shape_count: int = 0
    kinds: Counter[str] = field(default_factory=Counter)
    shape_classes: Counter[str] = field(default_factory=Counter)
    paths_written: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

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

    # Replace handlers from an earlier call instead of stacking them
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("shapecodec")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ImportLogger:
    """Logger for tracking import/export progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ImportStats()

    def log_document_start(self, path: str) -> None:
        """Log start of document import."""
        self._logger.debug("Importing drawing", path=path)

    def log_shape(self, index: int, shape: ParsedShape, summary: ShapeSummary | None) -> None:
        """Log one imported shape and its classification."""
        shape_class = summary.kind.value if summary is not None else None
        self._logger.debug(
            "Shape imported",
            index=index,
            kind=shape.kind.value,
            closed=shape.closed,
            points=len(shape.points),
            shape=shape_class,
        )
        self._stats.shape_count += 1
        self._stats.kinds[shape.kind.value] += 1
        if shape_class is not None:
            self._stats.shape_classes[shape_class] += 1

    def log_document_complete(self, path: str, duration_ms: float) -> None:
        """Log successful document import."""
        self._logger.info(
            "Drawing imported",
            path=path,
            shapes=self._stats.shape_count,
            duration_ms=round(duration_ms, 2),
        )

    def log_export_complete(self, path: str, paths_written: int) -> None:
        """Log successful document export."""
        self._logger.info("Drawing exported", path=path, paths=paths_written)
        self._stats.paths_written += paths_written

    def log_error(self, path: str, error: Exception) -> None:
        """Log an import/export error."""
        self._logger.error(
            "Drawing processing failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((path, str(error)))

    @property
    def stats(self) -> ImportStats:
        """Get current statistics."""
        return self._stats
