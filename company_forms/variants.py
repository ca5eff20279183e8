"""
Alternate structure and variant resolution for Company Forms.

Some companies have exactly one alternate structure (e.g. the nonprofit
gGmbH next to the GmbH). The registry pairs each base company with its
alternate, keyed by the base's stable id, so an alternate never resolves to
anything itself.

This module provides:
1. AlternateRegistry: base id -> (base, alternate)
2. expand_with_variants: insert each alternate right after its base
3. filter_companies: the variant-aware search filter used by list views
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from company_forms.models.company import Company

logger = logging.getLogger(__name__)


class AlternateRegistry:
    """
    Closed mapping from a base company to its single alternate structure.

    The registry is populated once and then only read.
    """

    def __init__(self, pairs: Iterable[Tuple[Company, Company]] = ()):
        self._pairs: Dict[str, Tuple[Company, Company]] = {}
        self._alternate_ids = set()
        for base, alternate in pairs:
            self.register(base, alternate)

    def register(self, base: Company, alternate: Company) -> None:
        """
        Register the alternate structure of a base company.

        Raises:
            ValueError: If the base already has an alternate
        """
        if base.id in self._pairs:
            raise ValueError(f"Company '{base.id}' already has an alternate structure")
        self._pairs[base.id] = (base, alternate)
        self._alternate_ids.add(alternate.id)
        logger.debug(f"Registered alternate '{alternate.id}' for '{base.id}'")

    def lookup(self, company: Company) -> Optional[Tuple[Company, Company]]:
        """Get (base, alternate) for a registered base, otherwise None."""
        return self._pairs.get(company.id)

    def is_base(self, company: Company) -> bool:
        """Check if the company has an alternate structure."""
        return company.id in self._pairs

    def is_alternate(self, company: Company) -> bool:
        """Check if the company is registered as some base's alternate."""
        return company.id in self._alternate_ids

    def __contains__(self, company: object) -> bool:
        return isinstance(company, Company) and self.is_base(company)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Tuple[Company, Company]]:
        return iter(self._pairs.values())


def _default_registry() -> AlternateRegistry:
    from company_forms.catalog import get_catalog
    return get_catalog().alternates


def expand_with_variants(
    companies: Iterable[Company],
    enabled: bool,
    registry: Optional[AlternateRegistry] = None,
) -> List[Company]:
    """
    Add the alternate structures of the companies to the list.

    Each occurrence of a registered base is followed immediately by its
    alternate. The input is left untouched.

    Args:
        companies: Companies in display order
        enabled: Whether to add the variants at all
        registry: Alternate registry to consult (defaults to the catalog's)

    Returns:
        A new list, with variants inserted when enabled
    """
    if not enabled:
        return list(companies)

    if registry is None:
        registry = _default_registry()

    expanded: List[Company] = []
    for company in companies:
        expanded.append(company)
        pair = registry.lookup(company)
        if pair is not None:
            expanded.append(pair[1])
    return expanded


def filter_companies(
    companies: Iterable[Company],
    query: str,
    show_variants: bool,
    registry: Optional[AlternateRegistry] = None,
) -> List[Company]:
    """
    Companies of a list view for the current search query.

    When variants are shown they are listed on their own, so a base only
    matches on its own fields. When they are hidden, a base also matches
    through its alternate's fields.

    Args:
        companies: Companies of one section
        query: Search query; empty matches everything
        show_variants: Whether alternates are listed next to their base
        registry: Alternate registry to consult (defaults to the catalog's)

    Returns:
        Matching companies in display order
    """
    if registry is None:
        registry = _default_registry()

    expanded = expand_with_variants(companies, show_variants, registry=registry)
    if not query:
        return expanded

    return [
        company for company in expanded
        if company.matches_search(query, include_alternate=not show_variants, registry=registry)
    ]
