"""
Mixed-form composition for Company Forms.

A company can act as the management or a shareholder of another company,
e.g. a GmbH as the complementary of a KG ("GmbH & Co. KG"). Composition
takes a base company and an insertion company and replaces the first
eligible natural-person slot of the base with the insertion company.

Scan rules (first match wins, scanning stops):
    1. Walk the base's top-level nodes in order.
    2. Supervisory boards are never replaced.
    3. A layer of the target category with liability is replaced by an
       inserted-company layer carrying the same liability.
    4. Layers without liability and layers of other categories are skipped.
    5. A Row is checked on its immediate children only; on a match the row
       is replaced by a copy with that child substituted.
    6. Without a match the result is an unmodified copy of the structure.

The target category is Shareholder for forms whose shareholders double as
management, Management for every other form.
"""

import logging
from typing import AbstractSet, Any, List, Optional

from company_forms.models.company import Company, CompanyRole, Layer, LayerCategory, Row
from company_forms.models.layers import inserted_company

logger = logging.getLogger(__name__)


# Forms without a separate management layer
SHAREHOLDER_MANAGED_FORMS = frozenset({"ohg", "ug", "gug", "gmbh", "ggmbh"})


def replacement_role(
    base: Company,
    shareholder_managed: Optional[AbstractSet[str]] = None,
) -> CompanyRole:
    """
    Decide whether the insertion fills the base's management or shareholders.

    Args:
        base: The host company
        shareholder_managed: Ids of forms whose shareholders double as management

    Returns:
        CompanyRole.SHAREHOLDER for shareholder-managed forms, else MANAGEMENT
    """
    if shareholder_managed is None:
        shareholder_managed = SHAREHOLDER_MANAGED_FORMS
    if base.id in shareholder_managed:
        return CompanyRole.SHAREHOLDER
    return CompanyRole.MANAGEMENT


def _substitute(node: Any, role: CompanyRole, insertion: Company) -> Optional[Layer]:
    """The inserted-company layer replacing node, or None if node is not eligible."""
    if not isinstance(node, Layer):
        return None
    if node.category is LayerCategory.SUPERVISORY_BOARD:
        return None
    if node.category is not role.category:
        return None
    if not node.liability.is_liable:
        return None
    return inserted_company(insertion, role).with_liability(node.liability)


def _substitute_in_row(row: Row, role: CompanyRole, insertion: Company) -> Optional[Row]:
    """A copy of row with its first eligible child replaced, or None."""
    for index, child in enumerate(row.children):
        replacement = _substitute(child, role, insertion)
        if replacement is None:
            continue
        children = [c.model_copy(deep=True) for c in row.children]
        children[index] = replacement
        logger.debug(f"Replacing row child {index} ({child.variant_title}) with {insertion.title}")
        return row.model_copy(update={"children": children})
    return None


def compose_structure(
    structure: List[Any],
    role: CompanyRole,
    insertion: Company,
) -> List[Any]:
    """
    Copy a structure with the first eligible slot replaced by insertion.

    Args:
        structure: Top-level nodes of the base company
        role: Role the insertion performs (selects the target category)
        insertion: The company to embed

    Returns:
        A new list of nodes; an unmodified copy when nothing is eligible
    """
    composed = [node.model_copy(deep=True) for node in structure]

    for index, node in enumerate(structure):
        if isinstance(node, Row):
            replacement = _substitute_in_row(node, role, insertion)
        else:
            replacement = _substitute(node, role, insertion)
            if replacement is not None:
                logger.debug(f"Replacing layer {index} ({node.variant_title}) with {insertion.title}")

        if replacement is not None:
            composed[index] = replacement
            return composed

    logger.debug(f"No {role.value} layer with liability found, structure left unchanged")
    return composed


def compose_mixed_form(
    base: Company,
    insertion: Company,
    shareholder_managed: Optional[AbstractSet[str]] = None,
) -> Company:
    """
    Insert a company as management or shareholder into another company.

    The result combines the names with "& Co.", keeps the base's reason and
    drops tidbits. Neither input is modified.

    Args:
        base: The company the other company is inserted into
        insertion: The company that is inserted
        shareholder_managed: Ids of forms whose shareholders double as management

    Returns:
        A new Company for "<insertion> & Co. <base>"
    """
    role = replacement_role(base, shareholder_managed)
    logger.debug(f"Composing {insertion.title} & Co. {base.title} as {role.value}")

    return Company(
        id=f"{insertion.id}-co-{base.id}",
        abbreviation=f"{insertion.title} & Co. {base.title}",
        german_name=f"{insertion.german_name} & Co. {base.german_name}",
        english_translation=f"{insertion.english_translation} & Co. {base.english_translation}",
        reason=base.reason,
        tidbit=None,
        structure=compose_structure(base.structure, role, insertion),
    )
