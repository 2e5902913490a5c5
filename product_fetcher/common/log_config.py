"""
Logging Configuration

Two independent switches:
- verbosity of the pipeline itself (fetch attempts, extraction summary)
- the per-rule strategy trace emitted by the field extractors (rule id,
  match count, rejected and accepted values), shown only when requested

Output goes to stderr to keep stdout clean for the extraction report.
"""

import logging
import sys

ROOT_LOGGER = "product_fetcher"

# Every field extractor logs its rule attempts under this logger
TRACE_LOGGER = "product_fetcher.extraction.extractors"

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
TRACE_FORMAT = "%(levelname)-8s [%(module)s] %(message)s"


class _TraceAwareFormatter(logging.Formatter):
    """Shortens strategy-trace records to the extractor module name."""

    def __init__(self):
        super().__init__(LOG_FORMAT)
        self._trace = logging.Formatter(TRACE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if record.name.startswith(TRACE_LOGGER):
            return self._trace.format(record)
        return super().format(record)


def pipeline_level(verbose: bool = False, quiet: bool = False) -> int:
    """Level for the package logger; verbose wins over quiet."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False, trace: bool = False) -> None:
    """
    Configure the package loggers.

    Args:
        verbose: DEBUG for the pipeline (the strategy trace stays off)
        quiet: Only warnings and errors (fetch failures, skipped rules)
        trace: Log every rule attempt at DEBUG, whatever the other switches
    """
    level = pipeline_level(verbose, quiet)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_TraceAwareFormatter())

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

    # Skipped-rule warnings always pass; DEBUG attempts only with trace
    trace_logger = logging.getLogger(TRACE_LOGGER)
    trace_logger.setLevel(logging.DEBUG if trace else max(level, logging.INFO))
