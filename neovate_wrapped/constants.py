"""Constants for Neovate Wrapped.

Centralizes data locations, ranking limits, and display settings.
"""

# Data location (relative to the home directory)
NEOVATE_DIR_NAME = ".neovate"
PROJECTS_DIR_NAME = "projects"

# Session log files
SESSION_FILE_SUFFIX = ".jsonl"

# Record kind that participates in aggregation
MESSAGE_RECORD_TYPE = "message"

# Content block kind that denotes a tool invocation
TOOL_USE_BLOCK_TYPE = "tool_use"

# Placeholder for an unresolved model or provider
UNKNOWN_ID = "unknown"

# Ranking limits
TOP_MODELS_LIMIT = 3
TOP_PROVIDERS_LIMIT = 3
TOP_TOOLS_LIMIT = 5

# Display-name catalogue
MODELS_API_URL = "https://models.dev/api.json"
MODELS_API_TIMEOUT_SECONDS = 5

# Calendar labels (weekday index 0 is Sunday)
WEEKDAY_NAMES_FULL = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]
WEEKDAY_NAMES_SHORT = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MONTH_NAMES_SHORT = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# Date formats
DATE_KEY_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"

# CLI display constants
WEEKDAY_BAR_WIDTH = 30  # Max chars for the longest weekday bar
