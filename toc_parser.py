# Module for turning the raw TOC fragment into TOC entries

import logging
import re

import constants
from clients.site_client import fetch_text
from content_extractor import extract
from errors import ParseError
from models import TocEntry, strip_hidden_label

logger = logging.getLogger(__name__)

_ANCHOR_RE = re.compile(constants.TOC_ANCHOR_PATTERN)
_LEVEL_RES = [(level, re.compile(pattern)) for level, pattern in constants.LEVEL_PATTERNS]


def infer_level(label):
    """Nesting depth from the title text alone; most specific pattern wins."""
    for level, pattern in _LEVEL_RES:
        if pattern.search(label):
            return level
    return constants.DEFAULT_LEVEL


def _parse_ordinal(value):
    if not value.isdigit() or not value.isascii():
        raise ParseError(f"Invalid TOC ordinal value: {value!r}")
    ordinal = int(value)
    if ordinal > constants.MAX_ORDINAL_VALUE:
        raise ParseError(f"TOC ordinal value out of range: {value}")
    return ordinal


def parse_toc(toc_fragment):
    """
    Parses every TOC anchor in the fragment.

    Returns entries in the order they appear in the fragment (not sorted).
    A single malformed ordinal raises ParseError and no entries are returned.
    """
    entries = []
    for match in _ANCHOR_RE.finditer(toc_fragment):
        ordinal = _parse_ordinal(match.group('value'))
        title = match.group('title')
        level = infer_level(strip_hidden_label(title))
        entry = TocEntry(title=title, link=match.group('link'), ordinal=ordinal, level=level)
        logger.debug(f"Parsed TOC entry: {entry}")
        entries.append(entry)

    logger.info(f"Parsed {len(entries)} TOC entries.")
    return entries


def fetch_toc(config):
    """Downloads the book's home page once (no retry) and parses its TOC."""
    toc_url = config['toc_url']
    logger.info(f"Fetching TOC from {toc_url}")
    raw_html = fetch_text(toc_url, config=config)
    fragment = extract(raw_html, config['toc_begin_marker'], config['toc_end_marker'], source=toc_url)
    return parse_toc(fragment)
