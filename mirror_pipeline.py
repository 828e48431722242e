# Module orchestrating a complete mirror run

import logging
import os

import constants
from asset_cache import cache_images, cache_stylesheets
from clients.site_client import fetch_page_content
from file_handler import ensure_output_dirs, save_text
from models import page_filename
from page_renderer import render_page, stylesheet_names
from toc_parser import fetch_toc
from toc_tree import build_toc, render_toc_page

INERT_NAV = '<div style="color:#808080;">{}</div>'
NAV_LINK = '<a href="./{}">{}</a>'


def navigation_links(ordinal, config):
    """
    Previous/next links for a page. Outside the configured ordinal bounds the
    link becomes a greyed-out placeholder.
    """
    if ordinal - 1 >= config['first_ordinal']:
        prev_html = NAV_LINK.format(page_filename(ordinal - 1), "Previous")
    else:
        prev_html = INERT_NAV.format("Previous")

    if ordinal + 1 <= config['last_ordinal']:
        next_html = NAV_LINK.format(page_filename(ordinal + 1), "Next")
    else:
        next_html = INERT_NAV.format("Next")

    return prev_html, next_html


def mirror_entry(entry, dirs, config):
    """Fetches, caches, rewrites and persists one TOC entry. Returns the file path."""
    page_url = f"{config['site_origin']}{entry.link}"

    # Fetching (retried by the client decorator)
    content = fetch_page_content(page_url, config=config)

    # Caching + rewriting image references
    _, content = cache_images(content, dirs['img'], config)

    # Persisting
    prev_html, next_html = navigation_links(entry.ordinal, config)
    page_html = render_page(
        entry.label, content, prev_html, next_html,
        stylesheet_names(config['stylesheet_urls']),
        toc_filename=constants.TOC_FILENAME,
    )
    return save_text(page_html, os.path.join(dirs['out'], entry.filename))


def mirror_pages(toc, output_dir, config):
    """
    Mirrors every entry in ordinal order, one at a time.
    The first entry that cannot be mirrored stops the run; its error propagates
    and later entries are not touched.
    """
    dirs = ensure_output_dirs(output_dir)
    total = len(toc)
    saved = []
    for index, entry in enumerate(toc, start=1):
        progress_percent = (index / total) * 100
        logging.info(f"Processing page {index}/{total} ({progress_percent:.1f}%): {entry.link} -> {entry.filename}")
        saved.append(mirror_entry(entry, dirs, config))
    return saved


def run_mirror(config):
    """
    One complete mirror run: output tree, stylesheets, TOC page, every page.
    Returns the sorted TOC that was mirrored.
    """
    dirs = ensure_output_dirs(config['output_dir'])

    cache_stylesheets(config, dirs['css'])

    toc = build_toc(fetch_toc(config))
    logging.info(f"TOC ready: {len(toc)} entries.")

    save_text(render_toc_page(toc, config), os.path.join(dirs['out'], constants.TOC_FILENAME))

    mirror_pages(toc, dirs['out'], config)
    return toc
