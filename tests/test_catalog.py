"""
Tests for the static catalog, the catalog provider and statistics.

Run with: pytest tests/test_catalog.py -v
"""

import pytest

from company_forms.catalog import CompanyCatalog, get_catalog
from company_forms.catalog.sections import (
    MIXED_FORM_BASE_CANDIDATES,
    MIXED_FORM_INSERTION_CANDIDATES,
    SECTIONS,
    CatalogSection,
)
from company_forms.catalog.statistics import COMPANY_TYPE_SHARES, TRADE_REGISTER_SHARES, ranked_shares
from company_forms.config import Settings
from company_forms.models import LayerCategory
from company_forms.variants import AlternateRegistry

pytestmark = pytest.mark.catalog


@pytest.fixture
def catalog():
    return get_catalog()


# ============================================================================
# Static Catalog Tests
# ============================================================================

class TestStaticCatalog:
    """Test the shape of the catalog data."""

    def test_section_order(self, catalog):
        assert [s.title for s in catalog.sections] == [
            "Partnerships",
            "Corporations",
            "Cooperatives",
            "Other",
            "Mixed Forms (Examples)",
        ]

    def test_section_sizes(self, catalog):
        assert [len(s.companies) for s in catalog.sections] == [8, 7, 2, 4, 7]
        assert len(catalog.companies()) == 28

    def test_alternates_are_not_listed(self, catalog):
        listed = {c.id for c in catalog.companies()}

        for base, alternate in catalog.alternates:
            assert base.id in listed
            assert alternate.id not in listed

    def test_ids_are_unique(self, catalog):
        everything = catalog.companies() + [alternate for _, alternate in catalog.alternates]
        ids = [c.id for c in everything]

        assert len(ids) == len(set(ids))

    def test_every_company_has_a_structure(self, catalog):
        for company in catalog.companies():
            assert company.structure, company.title

    def test_mixed_forms_contain_an_inserted_company(self, catalog):
        for company in catalog.get_section("Mixed Forms (Examples)").companies:
            categories = [layer.category for layer in company.iter_layers()]
            assert LayerCategory.INSERTED_COMPANY in categories, company.title

    def test_builder_candidates_are_catalog_companies(self, catalog):
        for company in MIXED_FORM_BASE_CANDIDATES + MIXED_FORM_INSERTION_CANDIDATES:
            assert catalog.get_company(company.id) is company


# ============================================================================
# Lookup Tests
# ============================================================================

class TestLookup:
    """Test lookup by id and section."""

    def test_get_company(self, catalog):
        gmbh = catalog.get_company("gmbh")

        assert gmbh is not None
        assert gmbh.title == "GmbH"

    def test_alternates_are_reachable_by_id(self, catalog):
        assert catalog.get_company("ggmbh").title == "gGmbH"

    def test_unknown_id(self, catalog):
        assert catalog.get_company("plc") is None
        with pytest.raises(KeyError):
            catalog.require_company("plc")

    def test_get_section(self, catalog):
        assert catalog.get_section("Cooperatives").companies[0].id == "eg"
        assert catalog.get_section("Nope") is None

    def test_cached(self):
        assert get_catalog() is get_catalog()

    def test_duplicate_ids_are_rejected(self, limited_liability_company):
        clone = limited_liability_company.model_copy()
        sections = [CatalogSection(title="A", companies=[limited_liability_company, clone])]

        with pytest.raises(ValueError, match="Duplicate company id"):
            CompanyCatalog(sections, AlternateRegistry())


# ============================================================================
# Browse Tests
# ============================================================================

class TestBrowse:
    """Test the searchable section listing."""

    def test_default_lists_everything(self, catalog):
        sections = catalog.browse()

        assert [len(s.entries) for s in sections] == [8, 7, 2, 4, 7]
        assert sections[0].entries[0].name == "Einzelunternehmen"
        assert sections[0].footer == SECTIONS[0].footer

    def test_show_variants(self, catalog):
        sections = catalog.browse(show_variants=True)

        assert [len(s.entries) for s in sections] == [10, 12, 4, 5, 7]
        assert [c.id for c in sections[2].companies] == ["eg", "eg-mbh", "sce", "sce-mbh"]

    def test_translate_names(self, catalog):
        sections = catalog.browse(translate_names=True)

        assert sections[0].entries[0].name == "Sole Proprietor"

    def test_query_keeps_empty_sections(self, catalog):
        sections = catalog.browse("gemeinn")

        assert len(sections) == 5
        assert [c.id for c in sections[1].companies] == ["ug", "gmbh", "ag"]
        assert sections[0].entries == []
        assert sections[2].entries == []

    def test_query_is_case_insensitive(self, catalog):
        sections = catalog.browse("GMBH")

        assert "gmbh" in [c.id for c in sections[1].companies]

    def test_settings_defaults(self, monkeypatch):
        monkeypatch.setenv("COMPANY_FORMS_SHOW_COMPANY_VARIANTS", "true")
        monkeypatch.setenv("COMPANY_FORMS_TRANSLATE_NAMES", "true")

        sections = get_catalog().browse()

        assert len(sections[0].entries) == 10
        assert sections[0].entries[1].name == "Registered Merchant"

    def test_explicit_settings_object(self):
        catalog = CompanyCatalog(
            SECTIONS,
            get_catalog().alternates,
            settings=Settings(show_company_variants=True),
        )

        assert len(catalog.browse()[3].entries) == 5


# ============================================================================
# Compose Tests
# ============================================================================

class TestCatalogCompose:
    """Test the mixed forms builder entry point."""

    def test_default_pair(self, catalog):
        composed = catalog.compose()

        assert composed.title == "GmbH & Co. KG"

    def test_explicit_ids(self, catalog):
        assert catalog.compose("ag", "se").title == "SE & Co. AG"

    def test_defaults_from_settings(self):
        catalog = CompanyCatalog(
            SECTIONS,
            get_catalog().alternates,
            settings=Settings(mixed_form_base="kgaa", mixed_form_insertion="se"),
        )

        assert catalog.compose().title == "SE & Co. KGaA"

    def test_unknown_id(self, catalog):
        with pytest.raises(KeyError):
            catalog.compose("kg", "plc")


# ============================================================================
# Statistics Tests
# ============================================================================

class TestStatistics:
    """Test the prevalence data."""

    def test_company_types_sum_to_about_100(self):
        assert sum(COMPANY_TYPE_SHARES.values()) == pytest.approx(100, abs=0.5)

    def test_ranked_company_types(self):
        assert ranked_shares(COMPANY_TYPE_SHARES)[0] == ("Sole Proprietor", 59.2)

    def test_ranking_is_descending(self):
        values = [share for _, share in ranked_shares(TRADE_REGISTER_SHARES)]

        assert values == sorted(values, reverse=True)
        assert ranked_shares(TRADE_REGISTER_SHARES)[0][0] == "GmbH"

    def test_ties_keep_declaration_order(self):
        names = [name for name, _ in ranked_shares(TRADE_REGISTER_SHARES)]

        assert names.index("PartG") < names.index("OHG")
        assert names.index("EWIV") < names.index("KöR")
