# constants.py - Define constants used throughout the application

# --- Remote Site ---
SITE_ORIGIN = "https://redislabs.com"
TOC_URL = "https://redislabs.com/ebook/redis-in-action"
BOOK_TITLE = "Redis in Action"
SITE_ROOT_PREFIX = "/wp-content" # Asset refs starting with this get SITE_ORIGIN prepended

STYLESHEET_URLS = (
    "https://redislabs.com/wp-content/themes/twentyeleven/style.css",
    "https://redislabs.com/wp-content/themes/twentyeleven/redislabs.css",
    "https://redislabs.com/wp-content/themes/twentyeleven/ria.css",
    "https://redislabs.com/wp-content/themes/twentyeleven/css/fancy.css",
    "https://redislabs.com/wp-content/themes/twentyeleven/js/highlight/default.css",
)

# --- Content Markers ---
TOC_BEGIN_MARKER = '<div id="sidebar-toc">'
TOC_END_MARKER = '<div id="main-content-holder"'
CONTENT_BEGIN_MARKER = '<div id="academy-content">'
CONTENT_END_MARKER = '<!-- id="academy-content" -->'

# --- Patterns ---
TOC_ANCHOR_PATTERN = (
    r'<a value="(?P<value>[^"]*)" href="(?P<link>.*?)">'
    r'(?P<title>.*?)</a>' # Title may start with a hidden <span style="display: none">N</span> label
)

# Ordered most specific first; the first match wins, no match means level 1.
LEVEL_PATTERNS = (
    (4, r'^\d{1,2}\.\d{1,2}\.\d{1,2}\s'),
    (3, r'^(?:\d{1,2}\.\d{1,2}\s|[AB]\.\d{1,2}\.\d{1,2}\s)'),
    (2, r'^(?:Chapter\s\d{1,2}:\s|[AB]\.\d{1,2}\s)'),
)
DEFAULT_LEVEL = 1
MAX_ORDINAL_VALUE = 2**64 - 1 # Ordinals are unsigned 64-bit values

# --- File/Directory Names ---
DEFAULT_OUTPUT_DIR = "./ria-ebook"
DEFAULT_LOG_FILE = "mirror.log"
DEFAULT_LOG_LEVEL = "INFO"
TOC_FILENAME = "_toc.html"
PAGE_FILENAME_FORMAT = "{:03d}.html"
CSS_DIR_NAME = "css"
IMG_DIR_NAME = "img"
UNTITLED_FILENAME = "untitled" # Fallback for sanitized filenames
DEFAULT_ASSET_FILENAME = "downloaded_asset" # Fallback when a reference has no basename

# --- Limits ---
FILENAME_MAX_LENGTH = 100 # Max length for sanitized filenames (excluding extension)

# --- Navigation ---
DEFAULT_FIRST_ORDINAL = 0
DEFAULT_LAST_ORDINAL = 189

# --- Request Defaults ---
DEFAULT_USER_AGENT = "BookMirror/1.0"
DEFAULT_PAGE_FETCH_ATTEMPTS = 3 # Total attempts for a page content fetch, first one included
DEFAULT_RETRY_DELAY = 0.0 # Base seconds between page fetch attempts (doubles per retry)
DEFAULT_TIMEOUT = 60 # Seconds for any single request
