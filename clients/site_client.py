# Module for fetching pages and assets from the book's site

import logging

import requests

import constants
from content_extractor import extract
from errors import FetchError, NotFoundError
from file_handler import save_binary
from .decorators import retry_request


def fetch_raw(url, config):
    """
    Fetches a URL with a single plain GET.
    Returns the body as bytes; raises FetchError on transport errors and
    non-2xx responses.
    """
    headers = {'User-Agent': config.get('user_agent', constants.DEFAULT_USER_AGENT)}
    request_timeout = config.get('request_timeout_seconds', constants.DEFAULT_TIMEOUT)

    logging.debug(f"Attempting to fetch: {url}")
    try:
        response = requests.get(url, headers=headers, timeout=request_timeout)
    except requests.exceptions.RequestException as e:
        raise FetchError(url, e) from e

    try:
        if not 200 <= response.status_code < 300:
            raise FetchError(url, f"HTTP status {response.status_code}")
        content = response.content
    finally:
        # Ensure the response is always closed
        response.close()

    logging.debug(f"Fetched {len(content)} bytes from {url}")
    return content


def fetch_text(url, config):
    """
    Fetches a URL and decodes the body as UTF-8. Invalid byte sequences are
    replaced with U+FFFD and a warning names the URL and the first bad offset.
    """
    content = fetch_raw(url, config=config)
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError as e:
        logging.warning(f"Content from {url} is not valid UTF-8 (first bad byte at offset {e.start}); replacing invalid bytes.")
        return content.decode('utf-8', errors='replace')


@retry_request(attempts_key="page_fetch_attempts", delay_key="retry_delay_seconds", retry_on=(FetchError, NotFoundError))
def fetch_page_content(url, config):
    """
    Downloads a book page and cuts out its content fragment.
    Both a failed download and missing content markers count as a failed
    attempt; the decorator retries up to the configured attempt count.
    """
    raw_html = fetch_text(url, config=config)
    return extract(raw_html, config['content_begin_marker'], config['content_end_marker'], source=url)


def download_file(url, file_path, config):
    """Downloads url and writes the bytes to file_path (overwriting)."""
    content = fetch_raw(url, config=config)
    save_binary(content, file_path)
    logging.info(f"Downloaded {url} -> {file_path}")
    return file_path
