# Module for cutting a content fragment out of a fetched HTML page

import logging

from errors import NotFoundError

logger = logging.getLogger(__name__)


def extract(raw_html, begin_marker, end_marker, source=None):
    """
    Returns the part of raw_html from the first begin_marker (included) up to
    the first end_marker (excluded).

    Raises NotFoundError when either marker is missing or the begin marker does
    not come strictly before the end marker. `source` is only used to give the
    error message some context (usually the page URL).
    """
    begin_index = raw_html.find(begin_marker)
    end_index = raw_html.find(end_marker)
    if begin_index == -1 or end_index == -1 or begin_index >= end_index:
        logger.debug(f"Markers not found or out of order (begin={begin_index}, end={end_index}) for {source}")
        raise NotFoundError(begin_marker, end_marker, source)

    return raw_html[begin_index:end_index]
