"""
Company catalog provider for Company Forms.

Read-only access to the static catalog for presentation layers:

1. CompanyCatalog: sections, lookup by id, alternate registry
2. browse(): the variant-aware, searchable section listing
3. compose(): the mixed forms builder, by catalog id
4. get_catalog(): cached factory
"""

import logging
from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from company_forms.catalog import companies
from company_forms.catalog.sections import SECTIONS, CatalogSection
from company_forms.composer import compose_mixed_form
from company_forms.config.settings import Settings, get_settings
from company_forms.models.company import Company
from company_forms.variants import AlternateRegistry, filter_companies

logger = logging.getLogger(__name__)


class BrowseEntry(BaseModel):
    """A company as listed, with the name shown for it."""
    model_config = ConfigDict(frozen=True)

    company: Company
    name: str


class BrowseSection(BaseModel):
    """A catalog section filtered for display."""
    model_config = ConfigDict(frozen=True)

    title: str
    footer: Optional[str] = None
    entries: List[BrowseEntry]

    @property
    def companies(self) -> List[Company]:
        return [entry.company for entry in self.entries]


class CompanyCatalog:
    """
    The static company catalog.

    Sections hold the companies in display order; alternate structures are
    reachable through the registry only.
    """

    def __init__(
        self,
        sections: List[CatalogSection],
        alternates: AlternateRegistry,
        settings: Optional[Settings] = None,
    ):
        self.sections = sections
        self.alternates = alternates
        self._settings = settings
        self._by_id: Dict[str, Company] = {}
        for company in self.companies():
            self._index(company)
        for base, alternate in alternates:
            self._index(base)
            self._index(alternate)
        logger.debug(f"Catalog loaded: {len(self._by_id)} companies in {len(sections)} sections")

    def _index(self, company: Company) -> None:
        existing = self._by_id.get(company.id)
        if existing is not None and existing is not company:
            raise ValueError(f"Duplicate company id in catalog: '{company.id}'")
        self._by_id[company.id] = company

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def companies(self) -> List[Company]:
        """All section companies in catalog order (without alternates)."""
        return [company for section in self.sections for company in section.companies]

    def get_company(self, company_id: str) -> Optional[Company]:
        """
        Get a company (including alternates) by its id.

        Args:
            company_id: Catalog id, e.g. "gmbh"

        Returns:
            Company or None
        """
        return self._by_id.get(company_id)

    def require_company(self, company_id: str) -> Company:
        """
        Get a company by its id.

        Raises:
            KeyError: If the id is not in the catalog
        """
        company = self.get_company(company_id)
        if company is None:
            raise KeyError(company_id)
        return company

    def get_section(self, title: str) -> Optional[CatalogSection]:
        """Get a section by its title."""
        for section in self.sections:
            if section.title == title:
                return section
        return None

    def browse(
        self,
        query: str = "",
        show_variants: Optional[bool] = None,
        translate_names: Optional[bool] = None,
    ) -> List[BrowseSection]:
        """
        List every section filtered by a search query.

        Sections without matches are kept (with no entries) so the section
        order stays stable while typing.

        Args:
            query: Search query; empty matches everything
            show_variants: List alternates next to their base (default from settings)
            translate_names: Name entries in English (default from settings)

        Returns:
            One BrowseSection per catalog section
        """
        if show_variants is None:
            show_variants = self.settings.show_company_variants
        if translate_names is None:
            translate_names = self.settings.translate_names

        result = []
        for section in self.sections:
            matches = filter_companies(
                section.companies, query, show_variants, registry=self.alternates
            )
            result.append(BrowseSection(
                title=section.title,
                footer=section.footer,
                entries=[
                    BrowseEntry(company=company, name=company.display_name(translate_names))
                    for company in matches
                ],
            ))
        logger.debug(
            f"Browse query={query!r} variants={show_variants}: "
            f"{sum(len(s.entries) for s in result)} entries"
        )
        return result

    def compose(
        self,
        base_id: Optional[str] = None,
        insertion_id: Optional[str] = None,
    ) -> Company:
        """
        Compose a mixed form from two catalog ids.

        Args:
            base_id: Id of the base company (default from settings)
            insertion_id: Id of the inserted company (default from settings)

        Returns:
            The composed Company

        Raises:
            KeyError: If an id is not in the catalog
        """
        base = self.require_company(base_id or self.settings.mixed_form_base)
        insertion = self.require_company(insertion_id or self.settings.mixed_form_insertion)
        return compose_mixed_form(base, insertion)


@lru_cache()
def get_catalog() -> CompanyCatalog:
    """
    Get the cached catalog instance.

    Returns:
        CompanyCatalog built from the static company definitions
    """
    return CompanyCatalog(
        sections=SECTIONS,
        alternates=AlternateRegistry(companies.ALTERNATE_STRUCTURES),
    )
