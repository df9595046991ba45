import json

import httpx
import pytest


class RecordingTransport:
    """httpx.MockTransport wrapper that replays one canned response and keeps every request."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.requests = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport)

    @property
    def bodies(self):
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def mock_api():
    """Factory: mock_api(payload=..., status_code=..., text=...) -> RecordingTransport."""
    return RecordingTransport


# ---------------------------------------------------------------------------
# Canned payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def drug_payload():
    return {
        "data": {
            "drug": {
                "name": "ASPIRIN",
                "description": "Small molecule drug",
                "isApproved": True,
                "knownDrugs": {
                    "uniqueDrugs": 1,
                    "uniqueTargets": 1,
                    "uniqueDiseases": 1,
                    "count": 1,
                    "rows": [
                        {
                            "approvedName": "A",
                            "approvedSymbol": "B",
                            "targetId": "T1",
                            "diseaseId": "D1",
                            "drugId": "CHEMBL25",
                        }
                    ],
                },
            }
        }
    }


@pytest.fixture
def search_payload():
    return {
        "data": {
            "search": {
                "aggregations": {
                    "total": 25,
                    "entities": [
                        {
                            "name": "drug",
                            "total": 5,
                            "categories": [{"name": "drug", "total": 5}],
                        },
                        {
                            "name": "target",
                            "total": 20,
                            "categories": [
                                {"name": "protein_coding", "total": 18},
                                {"name": "lncRNA", "total": 2},
                            ],
                        },
                    ],
                },
                "hits": [
                    {"id": "CHEMBL25", "entity": "drug", "name": "ASPIRIN"},
                    {"id": "ENSG00000073756", "entity": "target", "name": "PTGS2"},
                    {"id": "ENSG00000095303", "entity": "target", "name": "PTGS1"},
                ],
                "total": 25,
            }
        }
    }
