# Module for caching page images and the site's stylesheets locally

import html
import logging
import os
import re

from bs4 import BeautifulSoup

import constants
from clients.site_client import download_file
from file_handler import asset_filename
from models import CachedAsset

logger = logging.getLogger(__name__)


def find_image_refs(page_content):
    """<img src> values in first-seen order, without duplicates or data: URIs."""
    refs = []
    soup = BeautifulSoup(page_content, 'html.parser')
    for img_tag in soup.find_all('img', src=True):
        src = img_tag['src']
        # Basic check to ignore inline data URIs
        if src and not src.startswith('data:') and src not in refs:
            refs.append(src)
    return refs


def resolve_asset_url(ref, config):
    """Site-root-relative references are prefixed with the site origin."""
    if ref.startswith(config['site_root_prefix']):
        return f"{config['site_origin']}{ref}"
    return ref


def cache_images(page_content, img_dir, config):
    """
    Downloads every image the page references into img_dir and rewrites the
    page to use the local copies.

    Returns (rewrite_table, rewritten_content) where rewrite_table maps each
    original reference to 'img/<basename>'. Any failed download raises
    FetchError and any failed write StorageError; nothing is rewritten then.
    """
    cached = []
    for ref in find_image_refs(page_content):
        filename = asset_filename(ref)
        download_file(resolve_asset_url(ref, config), os.path.join(img_dir, filename), config=config)
        cached.append(CachedAsset(remote_ref=ref, local_ref=f"{constants.IMG_DIR_NAME}/{filename}"))

    rewrite_table = {asset.remote_ref: asset.local_ref for asset in cached}
    if rewrite_table:
        page_content = rewrite_references(page_content, rewrite_table)
        logger.info(f"Cached {len(rewrite_table)} images into {img_dir}")
    return rewrite_table, page_content


def rewrite_references(page_content, rewrite_table):
    """
    Replaces every occurrence of each original reference in one pass, longest
    reference first, so a replacement is never rewritten again. References
    are also matched in their entity-escaped form (`&amp;`), which is how they
    appear in the markup when the parsed src contains an ampersand.
    """
    replacements = {}
    for ref, local_ref in rewrite_table.items():
        replacements[ref] = local_ref
        replacements.setdefault(html.escape(ref, quote=False), local_ref)
    refs = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(ref) for ref in refs))
    return pattern.sub(lambda match: replacements[match.group(0)], page_content)


def cache_stylesheets(config, css_dir):
    """Downloads each configured stylesheet to css_dir under its base name."""
    saved = []
    for url in config['stylesheet_urls']:
        saved.append(download_file(url, os.path.join(css_dir, os.path.basename(url)), config=config))
    logger.info(f"Cached {len(saved)} stylesheets into {css_dir}")
    return saved
