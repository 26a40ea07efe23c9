"""High-value constants for the argumend package."""

# Package metadata
PACKAGE_VERSION = "0.1.0"
SERVER_NAME = "argumend"

# Suggestion defaults
DEFAULT_MAX_SUGGESTIONS = 3
DEFAULT_CUTOFF = 0.6
DEFAULT_MESSAGE_SEPARATOR = "; "

# Message templates
UNSUPPORTED_KEYWORD_PREFIX = "found unsupported keyword argument"
NO_CLOSE_MATCH_SUFFIX = "and no valid keyword argument is a close match"
