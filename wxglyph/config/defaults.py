"""Default file locations and forecast coordinates."""

DEFAULT_CONFIG_PATH = "config/wxglyph.yaml"
DEFAULT_TOKEN_PATH = "config/darksky.json"

DARKSKY_BASE_URL = "https://api.darksky.net"

# Ballard, Seattle
DEFAULT_LATITUDE = 47.698
DEFAULT_LONGITUDE = -122.379
