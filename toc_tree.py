# Module for ordering TOC entries and rendering them as nested lists

import logging

import constants
from page_renderer import render_toc_document

logger = logging.getLogger(__name__)


def build_toc(entries):
    """Sorts entries by ordinal; entries with equal ordinals keep their match order."""
    return sorted(entries, key=lambda entry: entry.ordinal)


def render_toc(toc):
    """
    Renders the sorted TOC as nested <ul> lists.

    The walk keeps a current level starting at 1. A deeper entry opens one
    list and moves the cursor straight to its level, so a jump of several
    levels only nests once. A shallower entry closes one list per level
    stepped back. At the end only the nested lists still open are closed.
    """
    lines = ["<ul>"]
    current_level = constants.DEFAULT_LEVEL
    open_lists = 0
    for entry in toc:
        if entry.level > current_level:
            lines.append("<ul>")
            open_lists += 1
            current_level = entry.level
        elif entry.level < current_level:
            steps = current_level - entry.level
            lines.extend("</ul>" for _ in range(steps))
            open_lists = max(0, open_lists - steps)
            current_level = entry.level

        lines.append(f'<li><a href="./{entry.filename}">{entry.title}</a></li>')

    lines.extend("</ul>" for _ in range(open_lists))
    lines.append("</ul>")
    return "\n".join(lines)


def render_toc_page(toc, config):
    """The standalone table of contents document written to _toc.html."""
    logger.debug(f"Rendering TOC page with {len(toc)} entries")
    return render_toc_document(config['book_title'], render_toc(toc))
