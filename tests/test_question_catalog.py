# tests/test_question_catalog.py

"""
Question Catalog Tests - built-in snapshot, lookups and JSON import/export
"""

import json

import pytest

from orbit.core.exceptions import CatalogFormatException
from orbit.models.enumerations import Section, SubSection
from orbit.models.question import Question
from orbit.scoring.dimension_scorer import DIMENSION_PAIRS
from orbit.scoring.question_catalog import (
    BUILT_IN_CATALOGS,
    DEFAULT_CATALOG,
    FULL_CATALOG,
    QuestionCatalog,
    export_catalog_json,
    load_catalog_file,
    load_catalog_json,
)


class TestBuiltInCatalog:
    """Shape of the built-in core-24 snapshot."""

    def test_version(self, catalog):
        assert catalog.version == "core-24"

    def test_total_questions(self, catalog):
        assert len(catalog) == 24

    @pytest.mark.parametrize("sub_section", [s for s in SubSection if s != SubSection.COACHABILITY])
    def test_two_questions_per_opposed_sub_section(self, catalog, sub_section):
        assert catalog.count(sub_section) == 2

    def test_four_coachability_questions(self, catalog):
        assert catalog.count(SubSection.COACHABILITY) == 4
        assert len(catalog.by_section(Section.COACHABILITY)) == 4

    def test_sub_sections_belong_to_their_section(self, catalog):
        for section, (sub_a, sub_b) in DIMENSION_PAIRS.items():
            for q in catalog.by_sub_section(sub_a) + catalog.by_sub_section(sub_b):
                assert q.section == section

    def test_ids_unique(self, catalog):
        ids = [q.id for q in catalog.questions]
        assert len(ids) == len(set(ids))

    def test_flags_carried(self, catalog):
        assert catalog.by_id("D3B2").is_reversed is True
        assert catalog.by_id("D3B2").negative_score is True
        assert catalog.by_id("C6A3").is_reversed is True
        assert catalog.by_id("E1B1").negative_score is False


class TestFullCatalog:
    """Shape of the complete full-80 bank."""

    def test_version_and_total(self):
        assert FULL_CATALOG.version == "full-80"
        assert len(FULL_CATALOG) == 80

    @pytest.mark.parametrize("sub_section", [s for s in SubSection if s != SubSection.COACHABILITY])
    def test_seven_questions_per_opposed_sub_section(self, sub_section):
        assert FULL_CATALOG.count(sub_section) == 7

    def test_ten_coachability_questions(self):
        assert FULL_CATALOG.count(SubSection.COACHABILITY) == 10

    def test_ids_unique(self):
        ids = [q.id for q in FULL_CATALOG.questions]
        assert len(set(ids)) == 80

    def test_core_is_leading_slice_of_full(self):
        for sub_section in SubSection:
            core = DEFAULT_CATALOG.by_sub_section(sub_section)
            full = FULL_CATALOG.by_sub_section(sub_section)
            assert full[:len(core)] == core

    def test_built_in_registry(self):
        assert set(BUILT_IN_CATALOGS) == {"core-24", "full-80"}
        assert BUILT_IN_CATALOGS["full-80"] is FULL_CATALOG
        assert BUILT_IN_CATALOGS["core-24"] is DEFAULT_CATALOG


class TestCatalogLookups:
    """Lookup helpers."""

    def test_by_id_known(self, catalog):
        q = catalog.by_id("E1A1")
        assert q.sub_section == SubSection.INSECURE

    def test_by_id_unknown_returns_none(self, catalog):
        assert catalog.by_id("NOPE") is None

    def test_all_questions_is_a_copy(self, catalog):
        items = catalog.all_questions()
        items.clear()
        assert len(catalog) == 24

    def test_count_for_empty_catalog(self):
        empty = QuestionCatalog(version="empty", questions=())
        assert len(empty) == 0
        assert empty.count(SubSection.PRIDE) == 0

    def test_duplicate_ids_rejected(self):
        q = DEFAULT_CATALOG.by_id("E1A1")
        with pytest.raises(CatalogFormatException):
            QuestionCatalog(version="dup", questions=(q, q))


class TestCatalogJson:
    """Admin JSON export / import."""

    def test_export_shape(self, catalog):
        data = json.loads(export_catalog_json(catalog))
        assert len(data) == 24
        assert set(data[0]) == {"id", "text", "section", "sub_section", "is_reversed", "negative_score"}
        assert data[0]["section"] == "ESTEEM"

    def test_import_preserves_questions(self, catalog):
        loaded = load_catalog_json(export_catalog_json(catalog), version="admin-edit")
        assert loaded.version == "admin-edit"
        assert loaded.questions == catalog.questions

    def test_import_malformed_json(self):
        with pytest.raises(CatalogFormatException):
            load_catalog_json("{not json", version="bad")

    def test_import_invalid_entry(self):
        payload = json.dumps([{"id": "X1", "text": "Q", "section": "NOPE", "sub_section": "PRIDE"}])
        with pytest.raises(CatalogFormatException):
            load_catalog_json(payload, version="bad")

    def test_import_duplicate_ids(self):
        entry = {"id": "X1", "text": "Q", "section": "ESTEEM", "sub_section": "PRIDE"}
        with pytest.raises(CatalogFormatException):
            load_catalog_json(json.dumps([entry, entry]), version="bad")

    def test_import_defaults_flags(self):
        entry = {"id": "X1", "text": "Q", "section": "ESTEEM", "sub_section": "PRIDE"}
        loaded = load_catalog_json(json.dumps([entry]), version="one")
        assert loaded.by_id("X1") == Question(
            id="X1", text="Q", section=Section.ESTEEM, sub_section=SubSection.PRIDE,
        )

    def test_load_file_uses_stem_as_version(self, tmp_path, catalog):
        path = tmp_path / "spring-2026.json"
        path.write_text(export_catalog_json(catalog), encoding="utf-8")
        loaded = load_catalog_file(str(path))
        assert loaded.version == "spring-2026"
        assert len(loaded) == 24
