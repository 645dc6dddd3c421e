"""Configuration constants for the template runtime."""

# Filter defaults
DEFAULT_TRUNCATE_LENGTH = 255
DEFAULT_TRUNCATE_END = "..."
DEFAULT_INT_VALUE = 0
DEFAULT_FALLBACK_VALUE = ""

# Markup-significant characters and their entities.
ESCAPE_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#x27;",
    "`": "&#x60;",
}

# Text rendering of mappings, matching the template language's output.
OBJECT_TEXT = "[object Object]"
