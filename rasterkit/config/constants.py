"""Constants for rasterkit."""

from pathlib import Path

# Application constants
APP_NAME = "rasterkit"

# Default paths
DEFAULT_PUBLIC_DIR = "public"
DEFAULT_CONFIG_FILE = "rasterkit.yaml"
USER_CONFIG_FILE = Path.home() / ".config" / APP_NAME / "config.yaml"

# Config file locations (in order of priority)
CONFIG_LOCATIONS = [
    Path.cwd() / DEFAULT_CONFIG_FILE,
    USER_CONFIG_FILE,
]

# Output defaults
DEFAULT_OUTPUT_FORMAT = "png"

# Formats cairo can write
SUPPORTED_OUTPUT_FORMATS = ("png", "pdf", "ps", "svg")
