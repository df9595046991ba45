"""
Response extractors: typed views over raw Open Targets JSON payloads.

Interaction lookups treat a missing ``data.<kind>.knownDrugs.rows`` path as
"no interactions" and return an empty list. Search payloads must carry
``data.search``; anything else is a ParseError.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .constants import HITS_KEY, MAX_PAGE_SIZE
from .exceptions import ParseError
from .queries import parse_entity_type
from .schemas import (
    DiseaseNode,
    DrugNode,
    EntityType,
    InteractionResponse,
    InteractionRow,
    KnownDrugsSummary,
    SearchResponse,
    SearchResult,
    TargetNode,
)

logger = logging.getLogger(__name__)

EntityNode = Union[DrugNode, TargetNode, DiseaseNode]


def _entity_type(kind: Union[str, EntityType]) -> EntityType:
    entity_type = parse_entity_type(kind)
    if entity_type is None:
        raise ParseError(f"Unknown entity type: {kind}")
    return entity_type


def _entity_node(
    payload: Dict[str, Any], entity_type: EntityType
) -> Optional[EntityNode]:
    try:
        response = InteractionResponse.model_validate(payload)
    except ValidationError as exc:
        raise ParseError(f"Unexpected {entity_type.value} response shape: {exc}") from exc

    if response.data is None:
        return None

    if entity_type is EntityType.DRUG:
        return response.data.drug
    if entity_type is EntityType.TARGET:
        return response.data.target
    if entity_type is EntityType.DISEASE:
        return response.data.disease
    raise ParseError(f"Unhandled entity type: {entity_type}")


def extract_interactions(
    payload: Dict[str, Any], kind: Union[str, EntityType]
) -> List[InteractionRow]:
    """
    Pull ``data.<kind>.knownDrugs.rows`` out of an interaction payload.

    An unknown identifier comes back from the API as a null entity; that
    yields an empty list, not an error. Results are not checked for
    truncation at the 10000-row page size.
    """
    node = _entity_node(payload, _entity_type(kind))
    if node is None or node.knownDrugs is None or node.knownDrugs.rows is None:
        return []
    return list(node.knownDrugs.rows)


def extract_known_drugs_summary(
    payload: Dict[str, Any], kind: Union[str, EntityType], query_id: str
) -> KnownDrugsSummary:
    """Entity metadata plus knownDrugs counts for a single identifier."""
    entity_type = _entity_type(kind)
    node = _entity_node(payload, entity_type)
    if node is None:
        raise ParseError(f"No {entity_type.value} found for {query_id}")

    known = node.knownDrugs
    return KnownDrugsSummary(
        id_type=entity_type,
        query_id=query_id,
        entity=node.model_dump(exclude={"knownDrugs"}),
        count=(known.count or 0) if known else 0,
        unique_drugs=(known.uniqueDrugs or 0) if known else 0,
        unique_targets=(known.uniqueTargets or 0) if known else 0,
        unique_diseases=(known.uniqueDiseases or 0) if known else 0,
    )


def extract_search(payload: Dict[str, Any]) -> SearchResult:
    """
    Reshape a search payload into ``{entity name: categories, "hits": hits}``.

    Aggregation entities are inserted in order; a repeated name keeps the
    last entry, at the last entry's position. ``hits`` is written last and
    replaces any entity of the same name.
    """
    try:
        search = SearchResponse.model_validate(payload).data.search
    except ValidationError as exc:
        raise ParseError(f"Unexpected search response shape: {exc}") from exc

    if search.total > MAX_PAGE_SIZE:
        logger.info(
            "%d results found. Due to API limitations, only the first 10,000 are shown.",
            search.total,
        )

    results: SearchResult = {}
    for entity in search.aggregations.entities:
        results.pop(entity.name, None)
        results[entity.name] = entity.categories

    results.pop(HITS_KEY, None)
    results[HITS_KEY] = search.hits
    return results
