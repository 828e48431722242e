"""Data models shared by the TOC and mirroring modules."""

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

import constants

_HIDDEN_LABEL_RE = re.compile(r'^<span style="display: none">\d*?</span>')


@dataclass(frozen=True)
class TocEntry:
    """One navigable page of the book, created from one TOC anchor."""

    title: str
    link: str
    ordinal: int
    level: int = constants.DEFAULT_LEVEL

    @property
    def label(self) -> str:
        """Plain-text title with the hidden numeric label removed."""
        return strip_hidden_label(self.title)

    @property
    def filename(self) -> str:
        return page_filename(self.ordinal)


@dataclass(frozen=True)
class CachedAsset:
    """An image reference relocated under the page's img/ directory."""

    remote_ref: str
    local_ref: str


def page_filename(ordinal: int) -> str:
    return constants.PAGE_FILENAME_FORMAT.format(ordinal)


def strip_hidden_label(title: str) -> str:
    """Drops a leading display:none numeric label and reduces the rest to text."""
    visible = _HIDDEN_LABEL_RE.sub('', title, count=1)
    return BeautifulSoup(visible, 'html.parser').get_text().strip()
