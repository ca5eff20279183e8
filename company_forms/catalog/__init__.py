"""
Static catalog of German company forms.

Contains:
- companies: Company definitions and the alternate structure pairs
- sections: Named groups and the mixed forms builder candidates
- statistics: Prevalence data of company forms
- provider: CompanyCatalog and its cached factory
"""

from company_forms.catalog.provider import (
    BrowseEntry,
    BrowseSection,
    CompanyCatalog,
    get_catalog,
)
from company_forms.catalog.sections import (
    MIXED_FORM_BASE_CANDIDATES,
    MIXED_FORM_INSERTION_CANDIDATES,
    SECTIONS,
    CatalogSection,
)

__all__ = [
    "BrowseEntry",
    "BrowseSection",
    "CompanyCatalog",
    "get_catalog",
    "CatalogSection",
    "SECTIONS",
    "MIXED_FORM_BASE_CANDIDATES",
    "MIXED_FORM_INSERTION_CANDIDATES",
]
