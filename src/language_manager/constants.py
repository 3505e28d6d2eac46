"""
Centralized constants for Language Manager.

Import from here instead of hardcoding values.
"""

# ===========================================================================
# Resource resolution
# ===========================================================================
DESIGN_TIME_CONTEXT = ""            # Empty base path = designer / no-op mode
MISSING_KEY_PREFIX = "MissingKey:"  # Prefix of the visible missing-key sentinel
INVARIANT_CULTURE_NAME = ""         # Name of the invariant (default) culture

# ===========================================================================
# Resource files
# ===========================================================================
RESOURCE_FILE_SUFFIX = ".json"
BASE64_MARKER = "$base64"           # {"$base64": "..."} -> binary resource
FILE_MARKER = "$file"               # {"$file": "logo.png"} -> binary resource on disk

# ===========================================================================
# Configuration defaults
# ===========================================================================
DEFAULT_RESOURCE_ROOT = "_AppConfig/resources"
DEFAULT_STORE_SCHEME = "json"
DEFAULT_CACHE_SIZE = 32             # Resource sets kept per store
MISSING_KEY_LOG_SIZE = 1024        # Distinct misses remembered for log de-duplication
DEFAULT_LOG_LEVEL = "INFO"

ENV_RESOURCE_ROOT = "LANGUAGE_MANAGER_RESOURCE_ROOT"
ENV_CULTURE = "LANGUAGE_MANAGER_CULTURE"

# Environment variables consulted (in order) for the ambient UI culture
AMBIENT_LOCALE_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
