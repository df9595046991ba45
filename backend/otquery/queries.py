"""
Fixed GraphQL documents sent to the Open Targets Platform.

Interaction documents take a single ``$query_id`` variable and are keyed by
entity type; the search document takes ``$keywords`` and ``$size``.
"""

from typing import Optional, Union

from .schemas import EntityType

DRUG_QUERY = """
query drugTargetIndication($query_id: String!) {
  drug(chemblId: $query_id) {
    name
    description
    isApproved
    knownDrugs(size: 10000) {
      uniqueDrugs
      uniqueTargets
      uniqueDiseases
      count
      rows {
        approvedName
        approvedSymbol
        targetId
        diseaseId
        drugId
      }
    }
  }
}
"""

TARGET_QUERY = """
query targetIndicationDrug($query_id: String!) {
  target(ensemblId: $query_id) {
    biotype
    approvedName
    functionDescriptions
    knownDrugs(size: 10000) {
      uniqueDrugs
      uniqueTargets
      uniqueDiseases
      count
      rows {
        approvedName
        approvedSymbol
        targetId
        diseaseId
        drugId
      }
    }
  }
}
"""

DISEASE_QUERY = """
query indicationDrugTarget($query_id: String!) {
  disease(efoId: $query_id) {
    id
    name
    description
    knownDrugs(size: 10000) {
      uniqueDrugs
      uniqueTargets
      uniqueDiseases
      count
      rows {
        approvedName
        approvedSymbol
        targetId
        diseaseId
        drugId
      }
    }
  }
}
"""

SEARCH_QUERY = """
query searchEntities($keywords: String!, $size: Int!) {
  search(queryString: $keywords, page: {index: 0, size: $size}) {
    aggregations {
      total
      entities {
        name
        total
        categories {
          name
          total
        }
      }
    }
    hits {
      id
      entity
      name
    }
    total
  }
}
"""

INTERACTION_QUERIES = {
    EntityType.DRUG: DRUG_QUERY,
    EntityType.TARGET: TARGET_QUERY,
    EntityType.DISEASE: DISEASE_QUERY,
}


def parse_entity_type(kind: Union[str, EntityType, None]) -> Optional[EntityType]:
    """Map a user-supplied id type onto ``EntityType``; None if unrecognised."""
    if isinstance(kind, EntityType):
        return kind
    try:
        return EntityType(kind)
    except ValueError:
        return None


def build_query(kind: Union[str, EntityType, None]) -> Optional[str]:
    """
    Return the interaction document for ``kind``.

    Unknown kinds give None rather than raising, so the caller decides how
    to report them.
    """
    entity_type = parse_entity_type(kind)
    if entity_type is None:
        return None
    return INTERACTION_QUERIES[entity_type]
