"""
Gallery configuration.

Constants for the Dog CEO API, the search panel and the carousel.
A few of them can be overridden from a local .env file or the environment.
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Dog CEO API
DOG_API_BASE_URL = os.getenv("DOG_API_BASE_URL", "https://dog.ceo/api")
REQUEST_TIMEOUT = float(os.getenv("DOG_API_TIMEOUT", "15"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Image counts
DEFAULT_IMAGE_COUNT = 6
IMAGES_PER_BREED = 2

# Search panel
MAX_SUGGESTIONS = 4

# Carousel (Glide.js options)
CAROUSEL_TYPE = "carousel"
CAROUSEL_PER_VIEW = 3
CAROUSEL_FOCUS_AT = "center"
CAROUSEL_AUTOPLAY_MS = 1500
# max viewport width (px) -> slides per view
CAROUSEL_BREAKPOINTS = {800: 2, 480: 1}
CAROUSEL_HEIGHT = 340

GLIDE_VERSION = "3.6.0"
GLIDE_JS_URL = f"https://cdn.jsdelivr.net/npm/@glidejs/glide@{GLIDE_VERSION}/dist/glide.min.js"
GLIDE_CSS_URL = f"https://cdn.jsdelivr.net/npm/@glidejs/glide@{GLIDE_VERSION}/dist/css/glide.core.min.css"

# Page text
APP_TITLE = "Find a Gallery of YOUR Favorite Dogs!"
SEARCH_PLACEHOLDER = "Search Dogs"
