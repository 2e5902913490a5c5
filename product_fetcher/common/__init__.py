# Common utilities
from .config_loader import load_config, load_fetcher_settings, load_pattern_table
from .errors import (
    ConfigError,
    FetchUnavailable,
    InvalidArgument,
    PatternEvaluationError,
    ProductFetcherError,
)
from .log_config import setup_logging
from .text_utils import clean_text, decode_entities, strip_tags, unescape_json_string
