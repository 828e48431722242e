# Decorators for HTTP client functions
import time
import logging
import functools
from collections.abc import Mapping

import constants
from errors import MirrorError


def _find_url(args, kwargs):
    """Finds the URL a wrapped call works on, for log messages."""
    url_to_log = kwargs.get('url') # Prioritize 'url' kwarg
    if not url_to_log:
        # Find first string arg starting with http
        for arg in args:
            if isinstance(arg, str) and arg.startswith('http'):
                url_to_log = arg
                break
    return url_to_log


def retry_request(attempts_key="page_fetch_attempts", delay_key="retry_delay_seconds", retry_on=(MirrorError,)):
    """
    Decorator that re-runs a fetch until it succeeds or runs out of attempts.
    Assumes the wrapped function:
    - Accepts a 'config' mapping keyword argument (`config=...`) containing keys
      specified by `attempts_key` and `delay_key`.
    - Returns the successful result or raises one of `retry_on` on failure.

    The attempt count includes the first call. Between attempts the decorator
    sleeps `delay * 2 ** (retry - 1)` seconds (nothing when delay is 0). When
    every attempt fails the last exception is re-raised unchanged.

    Args:
        attempts_key (str): Key in the config mapping for total attempts.
        delay_key (str): Key in the config mapping for base delay in seconds.
        retry_on (tuple): Exception types that trigger another attempt.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            config = kwargs.get('config')
            if not isinstance(config, Mapping):
                raise TypeError(
                    f"Decorator @retry_request requires 'config' mapping as a keyword argument "
                    f"for function {func.__name__}."
                )

            max_attempts = max(1, config.get(attempts_key, constants.DEFAULT_PAGE_FETCH_ATTEMPTS))
            delay = config.get(delay_key, constants.DEFAULT_RETRY_DELAY)

            url_to_log = _find_url(args, kwargs)
            log_url_snippet = f"for {url_to_log}" if url_to_log else f"in {func.__name__}"

            attempt = 1
            while True:
                try:
                    return func(*args, **kwargs)
                except retry_on as e:
                    if attempt >= max_attempts:
                        logging.error(f"Request failed {log_url_snippet} after {max_attempts} attempts. Last error: {e}")
                        raise
                    wait_time = (2 ** (attempt - 1)) * delay
                    logging.warning(
                        f"Attempt {attempt}/{max_attempts} failed {log_url_snippet}: {e}. "
                        f"Retrying after delay of {wait_time:.2f} seconds..."
                    )
                    if wait_time > 0:
                        time.sleep(wait_time)
                    attempt += 1

        return wrapper
    return decorator
