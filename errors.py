# Exception types raised while mirroring. Every one of them aborts the run.


class MirrorError(Exception):
    """Base class for all mirroring failures."""


class FetchError(MirrorError):
    """Network/transport failure or non-2xx response for a remote resource."""

    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class NotFoundError(MirrorError):
    """Delimiter markers missing or out of order in a fetched document."""

    def __init__(self, begin_marker, end_marker, source=None):
        self.begin_marker = begin_marker
        self.end_marker = end_marker
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Can't find content between {begin_marker!r} and {end_marker!r}{where}")


class ParseError(MirrorError):
    """Malformed ordinal value in a TOC anchor."""


class StorageError(MirrorError):
    """Local filesystem failure (directory creation or file write)."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error writing {path}: {reason}")
