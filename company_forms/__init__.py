"""
Company Forms - Structure Model of German Legal Forms of Companies

This package models each German legal form as a schematic "company form
graphic": a vertical stack of structural layers (supervisory board,
management, shareholders, capital/stocks) with liability indicators,
optionally grouped into side-by-side rows. It provides:

- A declarative structure model (Layer, Row, Company)
- Alternate structure and variant resolution
- Mixed-form composition ("GmbH & Co. KG")
- A static catalog of German company forms

Architecture:
    - models/: Structure, layer and liability models (Pydantic)
    - variants.py: Alternate registry, variant expansion and search filter
    - composer.py: Mixed-form composition
    - catalog/: Static company definitions, sections and statistics
    - config/: Configuration management

Usage:
    from company_forms import get_catalog, compose_mixed_form

    catalog = get_catalog()
    kg = catalog.require_company("kg")
    gmbh = catalog.require_company("gmbh")
    gmbh_co_kg = compose_mixed_form(base=kg, insertion=gmbh)
"""

__version__ = "0.1.0"

from company_forms.models import (
    Company,
    CompanyRole,
    Layer,
    LayerCategory,
    Liability,
    Row,
    build_structure,
    row,
)
from company_forms.variants import (
    AlternateRegistry,
    expand_with_variants,
    filter_companies,
)
from company_forms.composer import compose_mixed_form
from company_forms.catalog import CompanyCatalog, get_catalog

__all__ = [
    # Models
    "Company",
    "CompanyRole",
    "Layer",
    "LayerCategory",
    "Liability",
    "Row",
    "build_structure",
    "row",
    # Variants
    "AlternateRegistry",
    "expand_with_variants",
    "filter_companies",
    # Composition
    "compose_mixed_form",
    # Catalog
    "CompanyCatalog",
    "get_catalog",
]
