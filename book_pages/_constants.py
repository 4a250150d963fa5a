"""Common literal values used across book_pages.

These constants keep content filenames and export names centralized so the
loader, exporter, and tests can import the same values without drifting.
Intended for internal use within the book_pages package.

Examples
--------
>>> from book_pages import _constants
>>> _constants.PROPS_FILE_TEMPLATE.format(slug="tutorial/hello-world")
'tutorial/hello-world.json'
>>> _constants.INDEX_FILENAME
'index.md'
"""

MARKDOWN_SUFFIX = ".md"
INDEX_FILENAME = "index.md"
DEFAULT_CONTENT_DIR = "content"
DEFAULT_BLOG_ROOT = "blog"
PROPS_FILE_TEMPLATE = "{slug}.json"
PATHS_MANIFEST = "paths.json"
LOG_LEVEL_ENV = "BOOK_PAGES_LOG_LEVEL"
