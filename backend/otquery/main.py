from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Any, Dict, List, Union
from contextlib import asynccontextmanager
import os

from .client import OpenTargetsClient
from .constants import DEFAULT_SEARCH_SIZE
from .schemas import ErrorResult


@asynccontextmanager
async def lifespan(app_instance):
    """Close the shared HTTP connection pool on shutdown."""
    yield
    ot_client.close()


app = FastAPI(
    title="otquery API",
    description="HTTP front for Open Targets Platform search and knownDrugs lookups",
    lifespan=lifespan,
)

# CORS: set CORS_ORIGINS="http://localhost:3000,https://your-frontend.com"
cors_origins_env = os.getenv("CORS_ORIGINS", "*")
ALLOWED_ORIGINS = (
    ["*"]
    if cors_origins_env.strip() == "*"
    else [o.strip() for o in cors_origins_env.split(",") if o.strip()]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Stateless apart from its connection pool, so one instance serves all requests.
ot_client = OpenTargetsClient()


def _to_json(result: Any) -> Union[Dict[str, Any], List[Any]]:
    if isinstance(result, ErrorResult):
        return result.model_dump()
    if isinstance(result, dict):
        return {key: [item.model_dump() for item in items] for key, items in result.items()}
    if isinstance(result, list):
        return [item.model_dump() for item in result]
    return result.model_dump(mode="json")


# --- Routes ---


@app.get("/")
def read_root():
    return {"message": "otquery API is running", "status": "active"}


@app.get("/search")
def search_entities(keywords: str, size: int = DEFAULT_SEARCH_SIZE):
    """
    Free-text search over the Open Targets Platform.
    Returns category counts per entity type plus the hit list.
    """
    return _to_json(ot_client.search(keywords, size))


@app.get("/interactions/{id_type}/{query_id}")
def get_interactions(id_type: str, query_id: str):
    """
    Known drug/target/disease interactions for a drug (ChEMBL id),
    target (Ensembl id) or disease (EFO id).
    """
    return _to_json(ot_client.get_interactions(query_id, id_type))


@app.get("/known_drugs/{id_type}/{query_id}")
def get_known_drugs_summary(id_type: str, query_id: str):
    """
    Entity metadata and knownDrugs counts for a single identifier.
    """
    return _to_json(ot_client.get_known_drugs_summary(query_id, id_type))


@app.get("/health")
def health_check():
    return {"status": "ok"}


# Local run
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
