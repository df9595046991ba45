"""
Open Targets Platform client: entity search and knownDrugs interaction lookup.

Every operation returns either data or an ``ErrorResult``; failures never
escape as exceptions. Diagnostics go to this module's logger.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx

from .constants import DEFAULT_SEARCH_SIZE, MAX_PAGE_SIZE, OT_API_URL, OT_TIMEOUT
from .exceptions import OTQueryError, UsageError
from .extract import extract_interactions, extract_known_drugs_summary, extract_search
from .queries import INTERACTION_QUERIES, SEARCH_QUERY, parse_entity_type
from .schemas import EntityType, ErrorResult, InteractionRow, KnownDrugsSummary, SearchResult
from .transport import post_graphql

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------
class OpenTargetsClient:
    """Synchronous client holding one persistent httpx connection pool."""

    def __init__(
        self,
        url: str = OT_API_URL,
        timeout: float = OT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._external = client is not None
        self.client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        if not self._external:
            self.client.close()

    def __enter__(self) -> "OpenTargetsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def search(
        self, keywords: str, size: int = DEFAULT_SEARCH_SIZE
    ) -> Union[SearchResult, ErrorResult]:
        """
        Free-text search across drugs, targets, diseases and other entities.

        Args:
            keywords: Search string (required)
            size: Number of hits to request, clamped to 10000

        Returns:
            Mapping of entity name -> category counts, plus ``"hits"``;
            or an ErrorResult.
        """
        try:
            self._require_keywords(keywords)
        except UsageError as exc:
            logger.warning("Search rejected: %s", exc.message)
            return ErrorResult(error=exc.message)

        if size > MAX_PAGE_SIZE:
            size = MAX_PAGE_SIZE
            logger.info(
                "Size exceeds the limit of the Open Targets API and has been "
                "automatically set to %d.",
                MAX_PAGE_SIZE,
            )

        try:
            payload = self._post(SEARCH_QUERY, {"keywords": keywords, "size": size})
            return extract_search(payload)
        except OTQueryError as exc:
            logger.error("Request failed for keywords %s: %s", keywords, exc.message)
            return ErrorResult(error=exc.message)

    def get_interactions(
        self, query_id: str, id_type: str
    ) -> Union[List[InteractionRow], ErrorResult]:
        """
        Known drug/target/disease interactions for a ChEMBL, Ensembl or EFO id.

        An identifier unknown to the platform yields an empty list.
        """
        try:
            entity_type, query_text = self._interaction_query(id_type)
        except UsageError as exc:
            logger.warning("%s", exc.message)
            return ErrorResult(error=exc.message)

        try:
            payload = self._post(query_text, {"query_id": query_id})
            return extract_interactions(payload, entity_type)
        except OTQueryError as exc:
            logger.error(
                "Request failed for query_id %s, id_type %s: %s",
                query_id,
                id_type,
                exc.message,
            )
            return ErrorResult(error=exc.message)

    def get_known_drugs_summary(
        self, query_id: str, id_type: str
    ) -> Union[KnownDrugsSummary, ErrorResult]:
        """Entity metadata and knownDrugs counts (drugs, targets, diseases, rows)."""
        try:
            entity_type, query_text = self._interaction_query(id_type)
        except UsageError as exc:
            logger.warning("%s", exc.message)
            return ErrorResult(error=exc.message)

        try:
            payload = self._post(query_text, {"query_id": query_id})
            return extract_known_drugs_summary(payload, entity_type, query_id)
        except OTQueryError as exc:
            logger.error(
                "Summary failed for query_id %s, id_type %s: %s",
                query_id,
                id_type,
                exc.message,
            )
            return ErrorResult(error=exc.message)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _require_keywords(keywords: str) -> None:
        if not keywords:
            raise UsageError("keywords is required")

    @staticmethod
    def _interaction_query(id_type: str) -> Tuple[EntityType, str]:
        entity_type = parse_entity_type(id_type)
        if entity_type is None:
            raise UsageError(f"Invalid id_type: {id_type}")
        return entity_type, INTERACTION_QUERIES[entity_type]

    def _post(self, query_text: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        return post_graphql(
            query_text,
            variables,
            client=self.client,
            url=self.url,
            timeout=self.timeout,
        )


# ---------------------------------------------------------------------------
# One-shot entry points
# ---------------------------------------------------------------------------
def search(
    keywords: str,
    size: int = DEFAULT_SEARCH_SIZE,
    client: Optional[httpx.Client] = None,
) -> Union[SearchResult, ErrorResult]:
    with OpenTargetsClient(client=client) as ot:
        return ot.search(keywords, size)


def get_interactions(
    query_id: str, id_type: str, client: Optional[httpx.Client] = None
) -> Union[List[InteractionRow], ErrorResult]:
    with OpenTargetsClient(client=client) as ot:
        return ot.get_interactions(query_id, id_type)


def get_known_drugs_summary(
    query_id: str, id_type: str, client: Optional[httpx.Client] = None
) -> Union[KnownDrugsSummary, ErrorResult]:
    with OpenTargetsClient(client=client) as ot:
        return ot.get_known_drugs_summary(query_id, id_type)
