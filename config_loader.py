# Module for loading and validating configuration
import json
from types import MappingProxyType

import constants

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

STRING_KEYS = (
    "site_origin", "toc_url", "book_title", "site_root_prefix",
    "toc_begin_marker", "toc_end_marker", "content_begin_marker", "content_end_marker",
    "output_dir", "log_file", "user_agent",
)


def default_config():
    """The compiled-in configuration, built from constants."""
    return {
        "site_origin": constants.SITE_ORIGIN,
        "toc_url": constants.TOC_URL,
        "book_title": constants.BOOK_TITLE,
        "site_root_prefix": constants.SITE_ROOT_PREFIX,
        "stylesheet_urls": list(constants.STYLESHEET_URLS),
        "toc_begin_marker": constants.TOC_BEGIN_MARKER,
        "toc_end_marker": constants.TOC_END_MARKER,
        "content_begin_marker": constants.CONTENT_BEGIN_MARKER,
        "content_end_marker": constants.CONTENT_END_MARKER,
        "output_dir": constants.DEFAULT_OUTPUT_DIR,
        "log_file": constants.DEFAULT_LOG_FILE,
        "log_level": constants.DEFAULT_LOG_LEVEL,
        "first_ordinal": constants.DEFAULT_FIRST_ORDINAL,
        "last_ordinal": constants.DEFAULT_LAST_ORDINAL,
        "page_fetch_attempts": constants.DEFAULT_PAGE_FETCH_ATTEMPTS,
        "retry_delay_seconds": constants.DEFAULT_RETRY_DELAY,
        "request_timeout_seconds": constants.DEFAULT_TIMEOUT,
        "user_agent": constants.DEFAULT_USER_AGENT,
    }


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _validate(config, config_path):
    if not _is_int(config['page_fetch_attempts']) or config['page_fetch_attempts'] < 1:
        raise ValueError("Config 'page_fetch_attempts' must be a positive integer.")
    if not isinstance(config['retry_delay_seconds'], (int, float)) or config['retry_delay_seconds'] < 0:
        raise ValueError("Config 'retry_delay_seconds' must be a non-negative number.")
    if not isinstance(config['request_timeout_seconds'], (int, float)) or config['request_timeout_seconds'] <= 0:
        raise ValueError("Config 'request_timeout_seconds' must be a positive number.")
    for key in ("first_ordinal", "last_ordinal"):
        if not _is_int(config[key]) or config[key] < 0:
            raise ValueError(f"Config '{key}' must be a non-negative integer.")
    if config['first_ordinal'] > config['last_ordinal']:
        raise ValueError("Config 'first_ordinal' must not be greater than 'last_ordinal'.")
    urls = config['stylesheet_urls']
    if not isinstance(urls, (list, tuple)) or not all(isinstance(url, str) for url in urls):
        raise ValueError("Config 'stylesheet_urls' must be a list of URL strings.")
    for key in STRING_KEYS:
        if not isinstance(config[key], str) or not config[key]:
            raise ValueError(f"Config '{key}' in '{config_path}' must be a non-empty string.")
    if not isinstance(config['log_level'], str) or config['log_level'].upper() not in LOG_LEVELS:
        raise ValueError(f"Config 'log_level' must be one of: {', '.join(LOG_LEVELS)}.")


def load_config(config_path=None):
    """
    Loads configuration, validates it and returns a read-only mapping.

    Without a path the compiled-in defaults are used as they are. With a path,
    the JSON object in that file overrides individual defaults.
    """
    config = default_config()
    if config_path is None:
        config['stylesheet_urls'] = tuple(config['stylesheet_urls'])
        return MappingProxyType(config)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            overrides = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON from config file '{config_path}': {e}") from e
    # FileNotFoundError propagates as is

    if not isinstance(overrides, dict):
        raise ValueError(f"Config file '{config_path}' must contain a JSON object.")

    unknown_keys = sorted(key for key in overrides if key not in config)
    if unknown_keys:
        raise ValueError(f"Config file '{config_path}' has unknown keys: {', '.join(unknown_keys)}")

    config.update(overrides)
    _validate(config, config_path)
    config['stylesheet_urls'] = tuple(config['stylesheet_urls'])
    return MappingProxyType(config)
