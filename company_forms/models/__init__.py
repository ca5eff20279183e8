"""
Models package for Company Forms.

Contains Pydantic models for:
- company: Structural nodes (Layer, Row), the builder and Company
- layers: Layer constructors, sub-types and presentation styles
- liability: The tri-state liability of a layer
"""

from company_forms.models.company import (
    Company,
    CompanyRole,
    Layer,
    LayerCategory,
    Row,
    StructuralNode,
    build_structure,
    row,
)
from company_forms.models.layers import (
    LAYER_STYLES,
    CapitalType,
    LayerStyle,
    ManagementType,
    ShareholderType,
    capital,
    inserted_company,
    management,
    shareholder,
    ship,
    stocks,
    style_for,
    supervisory_board,
)
from company_forms.models.liability import Liability

__all__ = [
    # Structure
    "Company",
    "CompanyRole",
    "Layer",
    "LayerCategory",
    "Row",
    "StructuralNode",
    "build_structure",
    "row",
    # Layers
    "CapitalType",
    "ManagementType",
    "ShareholderType",
    "capital",
    "inserted_company",
    "management",
    "shareholder",
    "ship",
    "stocks",
    "supervisory_board",
    "LAYER_STYLES",
    "LayerStyle",
    "style_for",
    # Liability
    "Liability",
]
