"""Application-wide constants.

This module centralizes all magic numbers and configuration constants
to ensure a single source of truth and easier maintenance.
"""

# =============================================================================
# Screenshot Provider
# =============================================================================

# Microlink CDN renders the target page and returns the raw image (free tier,
# no API key required)
DEFAULT_SCREENSHOT_PROVIDER_URL = "https://cdn.microlink.io/"

# Timeout for a single provider call (seconds). Full-page captures are slow.
DEFAULT_PROVIDER_TIMEOUT_SECONDS = 60.0

# Pixel density requested for every capture
DEVICE_SCALE_FACTOR = 2

# Image type requested from the provider
PROVIDER_IMAGE_TYPE = "png"

# =============================================================================
# Viewport Profiles
# =============================================================================

DESKTOP_VIEWPORT = "3840x2160"
MOBILE_VIEWPORT = "375x812"

# Estimated full-page heights (pixels). Not measured from the fetched image.
DESKTOP_ESTIMATED_HEIGHT = 12288
MOBILE_ESTIMATED_HEIGHT = 8192

# =============================================================================
# Chunking
# =============================================================================

# Maximum height of a single chunk (pixels)
MAX_CHUNK_HEIGHT = 4096

# =============================================================================
# Export
# =============================================================================

# Quality used for lossy exports (0.0 to 1.0)
JPEG_QUALITY = 0.95

# Pillow refuses to decode images above twice this many pixels. Desktop
# captures are 7680px wide, so the library default stops near 23k px tall.
MAX_IMAGE_PIXELS = 300_000_000

# Delay between successive exports in a batch (seconds)
EXPORT_DELAY_SECONDS = 0.3

# =============================================================================
# User-facing messages
# =============================================================================

URL_REQUIRED_MESSAGE = "URL is required"
INVALID_URL_MESSAGE = "Invalid URL provided"
UPSTREAM_FAILURE_MESSAGE = "Failed to analyze website. Please try another URL."
EMPTY_INPUT_MESSAGE = "Please enter a website URL"
DECODE_FAILURE_MESSAGE = "Failed to process image. Please try again."
