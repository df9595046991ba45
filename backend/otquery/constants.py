import os

# ---------------------------------------------------------------------------
# Open Targets Platform API
# ---------------------------------------------------------------------------
OT_API_URL = os.getenv(
    "OT_API_URL", "https://api.platform.opentargets.org/api/v4/graphql"
)

# Seconds before a request is abandoned
OT_TIMEOUT = float(os.getenv("OT_TIMEOUT", "30.0"))

# Hard page-size cap enforced by the API
MAX_PAGE_SIZE = 10000

DEFAULT_SEARCH_SIZE = MAX_PAGE_SIZE

INTERACTION_COLUMNS = [
    "approvedName",
    "approvedSymbol",
    "targetId",
    "diseaseId",
    "drugId",
]

HITS_KEY = "hits"
