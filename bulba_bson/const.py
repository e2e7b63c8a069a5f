"""
Application constants and format metadata.
"""

# Application info
APP_NAME = "Bulba BSON"
APP_VERSION = "0.1.0"

# Format spellings
HEADER = "BULBA!"
COMMENT_MARKER = "zZz"
ARRAY_OPEN = "<|"
ARRAY_CLOSE = "|>"
ARRAY_SEPARATOR = ","
TRUE_KEYWORD = "SuperEffective"
FALSE_KEYWORD = "NotVeryEffective"
NULL_KEYWORD = "MissingNo"
RESERVED_KEY = "Charizard"

# Section markers by evolution stage
SECTION_MARKERS = {
    1: "(o)",
    2: "(O)",
    3: "(@)",
}

# Structural limits
INDENT_WIDTH = 4
MAX_STAGE = 3
DEFAULT_MAX_ARRAY_DEPTH = 32
