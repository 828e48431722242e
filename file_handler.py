# Module for file system operations (directory setup, sanitizing, saving)

import os
import logging
import re
from urllib.parse import urlparse, unquote

import constants
from errors import StorageError


# --- Directory Setup ---
def ensure_output_dirs(output_dir):
    """
    Creates the output tree (<output_dir>, css/, img/) and returns the
    absolute paths keyed by 'out', 'css' and 'img'.
    """
    out_dir = os.path.abspath(output_dir)
    dirs = {
        'out': out_dir,
        'css': os.path.join(out_dir, constants.CSS_DIR_NAME),
        'img': os.path.join(out_dir, constants.IMG_DIR_NAME),
    }
    for path in dirs.values():
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            logging.error(f"Error creating directory {path}: {e}")
            raise StorageError(path, e) from e
    logging.debug(f"Output directories ready under {out_dir}")
    return dirs


# --- File Naming ---
def sanitize_filename(name):
    """Sanitizes a string to be used as a valid filename."""
    # Remove invalid characters
    name = re.sub(r'[\\/*?:\'"<>|]', '', name)
    # Remove leading/trailing whitespace/periods FIRST
    name = name.strip(' .')
    # Replace remaining spaces with underscores
    name = name.replace(' ', '_')
    name = name[:constants.FILENAME_MAX_LENGTH]
    name = name.strip(' .')
    if not name:
        name = constants.UNTITLED_FILENAME
    return name


def asset_filename(ref):
    """
    Local file name for an asset reference: the base name of its URL path.
    Two references sharing a base name map to the same file.
    """
    raw_name = os.path.basename(unquote(urlparse(ref).path))
    if not raw_name:
        logging.warning(f"Could not derive filename from asset reference: {ref}. Using fallback: {constants.DEFAULT_ASSET_FILENAME}")
        return constants.DEFAULT_ASSET_FILENAME

    base_filename, ext = os.path.splitext(raw_name)
    if not base_filename: # dotfile such as ".svg"
        return sanitize_filename(raw_name)
    return f"{sanitize_filename(base_filename)}{ext}"


# --- File Saving ---
def save_text(content, file_path):
    """Writes text to file_path as UTF-8, replacing any existing file."""
    try:
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        logging.error(f"Error writing file {file_path}: {e}")
        raise StorageError(file_path, e) from e
    logging.info(f"Successfully saved: {file_path}")
    return file_path


def save_binary(content, file_path):
    """Writes bytes to file_path, replacing any existing file."""
    try:
        with open(file_path, 'wb') as f:
            f.write(content)
    except OSError as e:
        logging.error(f"Error writing file {file_path}: {e}")
        raise StorageError(file_path, e) from e
    logging.debug(f"Saved {len(content)} bytes to {file_path}")
    return file_path
