import pytest

from content_extractor import extract
from errors import NotFoundError

BEGIN = '<div id="academy-content">'
END = '<!-- id="academy-content" -->'


@pytest.mark.parametrize("raw_html, expected", [
    (f"<html>{BEGIN}<p>Body</p>{END}</html>", f"{BEGIN}<p>Body</p>"),
    (f"{BEGIN}{END}", BEGIN), # Nothing between the markers
    # Only the first occurrence of each marker counts
    (f"x{BEGIN}one{END}{BEGIN}two{END}", f"{BEGIN}one"),
])
def test_extract_returns_fragment_between_markers(raw_html, expected):
    """The fragment starts at the begin marker and stops right before the end marker."""
    assert extract(raw_html, BEGIN, END) == expected


@pytest.mark.parametrize("raw_html", [
    "<html><p>No markers at all</p></html>",
    f"<html>{BEGIN}<p>No end</p></html>",
    f"<html><p>No begin</p>{END}</html>",
    f"<html>{END}<p>Reversed</p>{BEGIN}</html>",
])
def test_extract_missing_or_misordered_markers(raw_html):
    with pytest.raises(NotFoundError) as e:
        extract(raw_html, BEGIN, END, source="https://redislabs.com/page")
    assert "https://redislabs.com/page" in str(e.value)


def test_extract_same_position_is_not_found():
    """A begin marker that is not strictly before the end marker fails."""
    with pytest.raises(NotFoundError):
        extract("<div>abc</div>", "<div>", "<div>")
