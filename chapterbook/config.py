"""Configuration for chapterbook."""
from pathlib import Path


# Default content roots, relative to the site root
CONTENT_ROOT = "chapter"
GLOSSARY_ROOT = "glossary"
IMAGES_ROOT = "images"
LOGO = "mb-logo.jpeg"

# Bookmark persistence
BOOKMARK_KEY = "chapter-idx"
BOOKMARK_FILE = Path.home() / ".chapterbook" / "bookmarks.json"

# Glossary popups
MISSING_GLOSSARY_HREF = "missing.html"
DEFAULT_DIALOG_OPTIONS = {
    "autoOpen": True,
    "modal": False,
    "width": 600,
    "height": 400,
    "maxWidth": 800,
    "maxHeight": 500,
}

# Glossary stub generator
GLOSSARY_SUFFIXES = (".html", ".htm", ".xhtml")
GLOSSARY_STUB_BODY = """<!DOCTYPE HTML>
<BODY>
     No information available.
</BODY>
"""
