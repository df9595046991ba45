"""
otquery - Open Targets Platform GraphQL client.

    >>> from otquery import search, get_interactions
    >>> hits = search("cancer", size=50)
    >>> rows = get_interactions("CHEMBL25", "drug")

Both calls return an ``ErrorResult`` instead of raising on failure.
"""

from .client import OpenTargetsClient, get_interactions, get_known_drugs_summary, search
from .queries import build_query
from .schemas import EntityType, ErrorResult, InteractionRow, KnownDrugsSummary

__version__ = "0.1.0"

__all__ = [
    "OpenTargetsClient",
    "search",
    "get_interactions",
    "get_known_drugs_summary",
    "build_query",
    "EntityType",
    "ErrorResult",
    "InteractionRow",
    "KnownDrugsSummary",
]
