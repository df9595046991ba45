"""Tests for the fixed GraphQL documents and id-type dispatch."""


class TestBuildQuery:
    def test_each_entity_type_has_a_document(self):
        from otquery.queries import build_query
        assert "drug(chemblId: $query_id)" in build_query("drug")
        assert "target(ensemblId: $query_id)" in build_query("target")
        assert "disease(efoId: $query_id)" in build_query("disease")

    def test_documents_request_known_drugs_rows(self):
        from otquery.constants import INTERACTION_COLUMNS
        from otquery.queries import build_query
        for kind in ("drug", "target", "disease"):
            doc = build_query(kind)
            assert "knownDrugs(size: 10000)" in doc
            assert "$query_id: String!" in doc
            for column in INTERACTION_COLUMNS:
                assert column in doc

    def test_accepts_enum_members(self):
        from otquery.queries import build_query, DISEASE_QUERY
        from otquery.schemas import EntityType
        assert build_query(EntityType.DISEASE) == DISEASE_QUERY

    def test_unknown_kind_returns_none(self):
        from otquery.queries import build_query
        assert build_query("gene") is None
        assert build_query("Drug") is None
        assert build_query("") is None
        assert build_query(None) is None


class TestSearchQuery:
    def test_search_document_variables(self):
        from otquery.queries import SEARCH_QUERY
        assert "$keywords: String!" in SEARCH_QUERY
        assert "$size: Int!" in SEARCH_QUERY
        assert "page: {index: 0, size: $size}" in SEARCH_QUERY

    def test_search_document_fields(self):
        from otquery.queries import SEARCH_QUERY
        for field in ("aggregations", "entities", "categories", "hits", "total"):
            assert field in SEARCH_QUERY


class TestParseEntityType:
    def test_known_values(self):
        from otquery.queries import parse_entity_type
        from otquery.schemas import EntityType
        assert parse_entity_type("target") is EntityType.TARGET

    def test_unknown_value(self):
        from otquery.queries import parse_entity_type
        assert parse_entity_type("compound") is None
