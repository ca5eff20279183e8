"""
Company structure models for Company Forms.

A company's structure is an ordered tree of structural nodes:

    Company
      └── structure: [StructuralNode, ...]
            ├── Layer   (leaf: supervisory board, management, shareholder, ...)
            └── Row     (composite: layers placed side by side on one level)
                  └── children: [StructuralNode, ...]

Order is render order (top to bottom, left to right) and is preserved by
every transformation. Structures are declared with plain nested lists:

    Company(
        id="kg",
        abbreviation="KG",
        german_name="Kommanditgesellschaft",
        english_translation="Limited Partnership",
        structure=[
            row(
                management(ManagementType.COMPLEMENTARY, minimum=1).with_unlimited_liability(),
                shareholder(ShareholderType.LIMITED_PARTNER, minimum=1).with_limited_liability(),
            ),
            capital(),
        ],
    )

All models are frozen. Liability setters and composition return new values.
"""

import uuid
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Dict, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from company_forms.models.liability import Liability

if TYPE_CHECKING:
    from company_forms.variants import AlternateRegistry


def _new_id() -> str:
    return uuid.uuid4().hex


class LayerCategory(str, Enum):
    """The kind of structural concern a layer represents."""
    SUPERVISORY_BOARD = "supervisory_board"
    MANAGEMENT = "management"
    SHAREHOLDER = "shareholder"
    CAPITAL = "capital"
    STOCKS = "stocks"
    SHIP = "ship"
    INSERTED_COMPANY = "inserted_company"


class CompanyRole(str, Enum):
    """The role an inserted company performs in its host company."""
    MANAGEMENT = "management"
    SHAREHOLDER = "shareholder"

    @property
    def category(self) -> LayerCategory:
        """The layer category this role stands in for."""
        if self is CompanyRole.MANAGEMENT:
            return LayerCategory.MANAGEMENT
        return LayerCategory.SHAREHOLDER


class Layer(BaseModel):
    """
    A single structural layer of a company.

    Attributes:
        id: Opaque per-node token, used for list identity only
        label: Text shown in the graphic (title, custom description or amount)
        category: Kind of layer
        variant_title: Specific sub-kind within the category (e.g. "Complementary")
        explanation: Descriptive text about the sub-kind
        liability: Liability attached to the layer
        embedded_company: The company shown in an inserted-company layer
        role: Role of the embedded company (inserted-company layers only)
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    kind: Literal["layer"] = "layer"
    label: str
    category: LayerCategory
    variant_title: str
    explanation: str = ""
    liability: Liability = Liability.NONE
    embedded_company: Optional["Company"] = None
    role: Optional[CompanyRole] = None

    @model_validator(mode="after")
    def _check_inserted_company_fields(self) -> "Layer":
        if self.category is LayerCategory.INSERTED_COMPANY:
            if self.embedded_company is None or self.role is None:
                raise ValueError("inserted company layers require embedded_company and role")
        elif self.embedded_company is not None or self.role is not None:
            raise ValueError(
                f"embedded_company and role are only allowed on inserted company layers, "
                f"not on {self.category.value}"
            )
        return self

    def with_liability(self, liability: Liability) -> "Layer":
        """
        Return a copy of the layer with the given liability.

        Use when liability is computed. When declaring a structure by hand,
        prefer with_limited_liability() or with_unlimited_liability().
        """
        return self.model_copy(update={"liability": Liability(liability)})

    def with_unlimited_liability(self) -> "Layer":
        """Return a copy of the layer with unlimited liability."""
        return self.with_liability(Liability.UNLIMITED)

    def with_limited_liability(self) -> "Layer":
        """Return a copy of the layer with limited liability."""
        return self.with_liability(Liability.LIMITED)


class Row(BaseModel):
    """Layers (or nested rows) placed next to each other on the same level."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    kind: Literal["row"] = "row"
    children: List["StructuralNode"] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def _flatten_children(cls, value: Any) -> List[Any]:
        return build_structure(value)

    def iter_layers(self) -> Iterator[Layer]:
        """Walk every layer of the row depth first, in render order."""
        for child in self.children:
            if isinstance(child, Row):
                yield from child.iter_layers()
            else:
                yield child


StructuralNode = Annotated[Union[Layer, Row], Field(discriminator="kind")]


def _is_single_item(item: Any) -> bool:
    # Nodes, serialized nodes and strings are declarations in their own right
    return isinstance(item, (BaseModel, Mapping, str, bytes)) or not isinstance(item, Iterable)


def build_structure(*items: Any) -> List[Any]:
    """
    Flatten a structure declaration into one ordered list.

    Single nodes are kept as they are. Collections (lists, tuples, generators)
    are spliced in place, recursively, so generated sub-sequences can be mixed
    with literal nodes. Rows are not opened up: their children were flattened
    when the row was built.

    Args:
        *items: Nodes and/or collections of nodes

    Returns:
        Flat list preserving declaration order
    """
    flat: List[Any] = []
    for item in items:
        if _is_single_item(item):
            flat.append(item)
        else:
            flat.extend(build_structure(*item))
    return flat


def row(*items: Any) -> Row:
    """Build a Row from a declaration, flattening nested collections."""
    return Row(children=build_structure(*items))


class Company(BaseModel):
    """
    A German legal form of company and its schematic structure.

    Attributes:
        id: Stable key of the company (e.g. "gmbh"); random when not given
        german_name: Official German name
        abbreviation: Official abbreviation, if available
        english_translation: English translation of the name
        reason: Optional reason, purpose or objective of the company
        tidbit: Optional supplementary fact
        structure: Ordered top-level structural nodes
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    german_name: str
    abbreviation: Optional[str] = None
    english_translation: str
    reason: Optional[str] = None
    tidbit: Optional[str] = None
    structure: List[StructuralNode] = Field(default_factory=list)

    @field_validator("structure", mode="before")
    @classmethod
    def _flatten_structure(cls, value: Any) -> List[Any]:
        return build_structure(value)

    @property
    def title(self) -> str:
        """The abbreviation, or the German name if there is none."""
        if self.abbreviation:
            return self.abbreviation
        return self.german_name

    @property
    def subtitle(self) -> Optional[str]:
        """The German name when the title is an abbreviation, otherwise None."""
        if self.abbreviation is None:
            return None
        return self.german_name

    @property
    def shortened_title(self) -> str:
        """
        The title without lengthy parts, for compact pickers.

        Do not use where the accurate abbreviation matters. Currently only
        " (haftungsbeschränkt)" of UGs and gUGs is removed.
        """
        if self.abbreviation:
            return self.abbreviation.replace(" (haftungsbeschränkt)", "")
        return self.german_name

    def display_name(self, translate: bool = False) -> str:
        """Name for list rows: the English translation or the German name."""
        return self.english_translation if translate else self.german_name

    def iter_layers(self) -> Iterator[Layer]:
        """Walk every layer of the structure depth first, in render order."""
        for node in self.structure:
            if isinstance(node, Row):
                yield from node.iter_layers()
            else:
                yield node

    def search_fields(self) -> List[Optional[str]]:
        """Text fields that take part in search matching."""
        return [
            self.german_name,
            self.abbreviation,
            self.english_translation,
            self.reason,
            self.tidbit,
        ]

    def matches_search(
        self,
        query: str,
        include_alternate: bool = False,
        registry: Optional["AlternateRegistry"] = None,
    ) -> bool:
        """
        Determine if the company is a result for a search query.

        Matching is a case-insensitive substring match. Callers treat an
        empty query as "match everything" and skip calling this.

        Args:
            query: The search query
            include_alternate: Also match against the alternate structure, if any
            registry: Alternate registry to consult (defaults to the catalog's)

        Returns:
            True if any field contains the query
        """
        needle = query.casefold()
        candidates = self.search_fields()

        if include_alternate:
            pair = self.resolve_alternate(True, registry=registry)
            if pair is not None:
                alternate = pair[1]
                candidates.extend(alternate.search_fields())
                candidates.append(alternate.title)

        return any(text is not None and needle in text.casefold() for text in candidates)

    def resolve_alternate(
        self,
        enabled: bool = True,
        registry: Optional["AlternateRegistry"] = None,
    ) -> Optional[Tuple["Company", "Company"]]:
        """
        Get this company paired with its alternate structure.

        Args:
            enabled: When False, always returns None
            registry: Alternate registry to consult (defaults to the catalog's)

        Returns:
            (base, alternate) when enabled and this company is a registered base,
            otherwise None
        """
        if not enabled:
            return None
        if registry is None:
            from company_forms.catalog import get_catalog
            registry = get_catalog().alternates
        return registry.lookup(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.model_dump(mode="json")


Layer.model_rebuild()
Row.model_rebuild()
Company.model_rebuild()
