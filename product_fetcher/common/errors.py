"""
Error types.

Only InvalidArgument is meant to reach callers of the extraction
pipeline. FetchUnavailable and PatternEvaluationError are raised by the
lower layers and absorbed by the coordinator and the field extractors.
"""


class ProductFetcherError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgument(ProductFetcherError, ValueError):
    """Caller supplied a structurally invalid argument (e.g. a blank URL)."""


class FetchUnavailable(ProductFetcherError):
    """The page could not be fetched (network error, retries exhausted)."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Could not fetch {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PatternEvaluationError(ProductFetcherError):
    """A single extraction rule failed to compile or evaluate."""

    def __init__(self, rule_id: str, reason: str = ""):
        self.rule_id = rule_id
        self.reason = reason
        super().__init__(f"Pattern {rule_id!r} failed: {reason}")


class ConfigError(ProductFetcherError):
    """A configuration file is missing or malformed."""
