from pydantic import BaseModel, ConfigDict
from typing import List, Dict, Any, Optional, Union
from enum import Enum


class EntityType(str, Enum):
    DRUG = "drug"
    TARGET = "target"
    DISEASE = "disease"


class ErrorResult(BaseModel):
    error: str


# --- Interaction lookup ---

class InteractionRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    approvedName: str
    approvedSymbol: str
    targetId: str
    diseaseId: str
    drugId: str


class KnownDrugs(BaseModel):
    uniqueDrugs: Optional[int] = None
    uniqueTargets: Optional[int] = None
    uniqueDiseases: Optional[int] = None
    count: Optional[int] = None
    rows: Optional[List[InteractionRow]] = None


class DrugNode(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    isApproved: Optional[bool] = None
    knownDrugs: Optional[KnownDrugs] = None


class TargetNode(BaseModel):
    biotype: Optional[str] = None
    approvedName: Optional[str] = None
    functionDescriptions: Optional[List[str]] = None
    knownDrugs: Optional[KnownDrugs] = None


class DiseaseNode(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    knownDrugs: Optional[KnownDrugs] = None


class InteractionData(BaseModel):
    drug: Optional[DrugNode] = None
    target: Optional[TargetNode] = None
    disease: Optional[DiseaseNode] = None


class InteractionResponse(BaseModel):
    data: Optional[InteractionData] = None


class KnownDrugsSummary(BaseModel):
    id_type: EntityType
    query_id: str
    entity: Dict[str, Any] = {}
    count: int = 0
    unique_drugs: int = 0
    unique_targets: int = 0
    unique_diseases: int = 0


# --- Search ---

class CategoryCount(BaseModel):
    name: str
    total: int


class EntityAggregation(BaseModel):
    name: str
    total: int
    categories: List[CategoryCount] = []


class Aggregations(BaseModel):
    total: Optional[int] = None
    entities: List[EntityAggregation] = []


class SearchHit(BaseModel):
    id: str
    entity: str
    name: str


class SearchPayload(BaseModel):
    aggregations: Aggregations
    hits: List[SearchHit] = []
    total: int


class SearchData(BaseModel):
    search: SearchPayload


class SearchResponse(BaseModel):
    data: SearchData


# Entity name -> categories, plus "hits" -> hit list
SearchResult = Dict[str, Union[List[CategoryCount], List[SearchHit]]]
