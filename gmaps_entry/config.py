"""
Configuration for the Google Maps place entry extractor.

Module-level constants are the defaults. Server, CLI and logging settings
are resolved against GMAPS_ENTRY_* environment variables by
ExtractorConfig (see config_manager.py), which applies them here.
"""

# Document Layout
# The place preview response is a top-level array; the place data lives at [6].
XSSI_PREFIX = ")]}'"
DATA_INDEX = 6
MIN_TOP_LEVEL_LENGTH = 7

# Owner profile URL, formatted with the owner id found at data[57][2]
OWNER_LINK_TEMPLATE = "https://www.google.com/maps/contrib/{}"

# Websites on these hosts are not worth crawling for emails
EMAIL_UNFRIENDLY_HOSTS = (
    "facebook",
    "instagram",
    "twitter",
)

# API Server
API_HOST = "0.0.0.0"
API_PORT = 8000

# Parallel Processing (CLI, one worker per document)
DEFAULT_PARALLEL_WORKERS = 4
MAX_PARALLEL_WORKERS = 32

# Logging
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# CSV Output Columns
CSV_COLUMNS = (
    "link",
    "businessName",
    "category",
    "address",
    "workingHours",
    "popularTimes",
    "webSite",
    "phone",
    "plusCode",
    "reviewCount",
    "reviewRating",
    "reviewsPerRating",
    "latitude",
    "longitude",
    "cID",
    "status",
    "descriptions",
    "reviewsLink",
    "thumbnail",
    "timeZone",
    "priceRange",
    "dataID",
    "images",
    "reservations",
    "orderOnline",
    "services",
    "owner",
    "completeAddress",
    "about",
    "userReviews",
    "emails",
)
