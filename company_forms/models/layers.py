"""
Layer catalog for Company Forms.

Constructors for every kind of structural layer, the typed sub-kinds of
management, shareholders and capital with their explanations, and the
presentation lookup (color and dash pattern) keyed by layer category.

Label rules:
    fixed_amount=2             -> "2"          / "Mariner (2)"
    minimum=2                  -> "2+"         / "Mariner (2+)"
    capital minimum            -> "€25,000.00"
    capital minimum..maximum   -> "€1.00 – €24,999.00"
    stocks minimum             -> "min. €50,000.00" / "Label (min. €50,000.00)"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from company_forms.formatting import currency, min_currency, plus
from company_forms.models.company import Company, CompanyRole, Layer, LayerCategory


class ManagementType(str, Enum):
    """The specific type of management."""
    MANAGEMENT = "Management"
    COMPLEMENTARY = "Complementary"
    BOARD = "Board"
    BOARD_OF_DIRECTORS = "Board of Directors"
    MANAGEMENT_STRUCTURE = "Management Structure"

    @property
    def info(self) -> str:
        return _MANAGEMENT_INFO[self]


class ShareholderType(str, Enum):
    """The specific type of shareholder."""
    SHAREHOLDER = "Shareholder"
    LIMITED_PARTNER = "Limited Partner"
    STOCKHOLDER = "Stockholder"
    COOPERATIVE_MEMBER = "Cooperative Member"
    CLUB_MEMBER = "Club Member"
    POLICYHOLDER = "Policyholder"
    SHAREHOLDER_STRUCTURE = "Shareholder Structure"

    @property
    def info(self) -> str:
        return _SHAREHOLDER_INFO[self]


class CapitalType(str, Enum):
    """The specific type of capital."""
    NO_COMPULSORY_CAPITAL = "No Compulsory Capital"
    CAPITAL = "Capital"
    PRIVATE_ASSETS = "Private Assets"
    PRIVATE_DEPOSITS = "Private Deposits"
    FOUNDATION_CAPITAL = "Foundation Capital"
    CLUB_CAPITAL = "Club Capital"
    CAPITAL_STRUCTURE = "Capital Structure"

    @property
    def info(self) -> str:
        return _CAPITAL_INFO[self]


_MANAGEMENT_INFO = {
    ManagementType.MANAGEMENT: "The management manages and represents the company.",
    ManagementType.COMPLEMENTARY: (
        "A complementary is an unlimited liable shareholder of a KG or KGaA that manages the company."
    ),
    ManagementType.BOARD: "The board manages and represents the company.",
    ManagementType.BOARD_OF_DIRECTORS: (
        "The board of directors manages and represents the company on their own responsibility."
    ),
    ManagementType.MANAGEMENT_STRUCTURE: (
        "The management structure defines the organs that lead and represent their company, "
        "as well as their liability."
    ),
}

_SHAREHOLDER_INFO = {
    ShareholderType.SHAREHOLDER: "A shareholder owns equity in a company.",
    ShareholderType.LIMITED_PARTNER: (
        "A limited partner is only liable with their deposits. "
        "However, they have no right to manage the company."
    ),
    ShareholderType.STOCKHOLDER: (
        "A stockholder is a shareholder of a company whose capital is divided into stocks. "
        "The whole of stockholders form the general assembly."
    ),
    ShareholderType.COOPERATIVE_MEMBER: "A person that provides assets to a cooperative.",
    ShareholderType.CLUB_MEMBER: "A person that holds membership of a club.",
    ShareholderType.POLICYHOLDER: "A person that gains insurance.",
    ShareholderType.SHAREHOLDER_STRUCTURE: (
        "The shareholder structure defines who, to what extent, with what rights, "
        "and with what liability a person or company owns a share of a company."
    ),
}

_CAPITAL_INFO = {
    CapitalType.NO_COMPULSORY_CAPITAL: "The company is not obligated to have capital.",
    CapitalType.CAPITAL: "The capital is the money, securities, and assets a company owns.",
    CapitalType.PRIVATE_ASSETS: "The money, securities, and assets of a person.",
    CapitalType.PRIVATE_DEPOSITS: (
        "Deposits are values that a person inserted into a company, i.e., money, securities, or assets."
    ),
    CapitalType.FOUNDATION_CAPITAL: (
        "The capital of a foundation. It has been gifted by a founder/donor "
        "and may only be used for the foundation's purpose."
    ),
    CapitalType.CLUB_CAPITAL: "The capital the club owns.",
    CapitalType.CAPITAL_STRUCTURE: "The capital structure defines what assets a company must and can have.",
}

SUPERVISORY_BOARD_INFO = "The supervisory board elects and controls the board."
STOCKS_INFO = (
    "The capital of the company is divided into stocks. The stocks may be traded on an exchange."
)
SHIP_INFO = (
    "A partner shipping company is based and dependent on a ship, used specifically for seafaring. "
    "The company is dissolved when the ship is lost."
)


def _counted_label(
    default: str,
    label: Optional[str],
    fixed_amount: Optional[int],
    minimum: Optional[int],
) -> str:
    if fixed_amount is not None and minimum is not None:
        raise ValueError("fixed_amount and minimum are mutually exclusive")
    if fixed_amount is not None:
        amount = str(fixed_amount)
    elif minimum is not None:
        amount = plus(minimum)
    else:
        return label or default
    if label:
        return f"{label} ({amount})"
    return amount


def supervisory_board(label: Optional[str] = None) -> Layer:
    """A supervisory board, optionally with a custom label (e.g. "From 500 employees")."""
    return Layer(
        label=label or "Supervisory Board",
        category=LayerCategory.SUPERVISORY_BOARD,
        variant_title="Supervisory Board",
        explanation=SUPERVISORY_BOARD_INFO,
    )


def management(
    variant: ManagementType = ManagementType.MANAGEMENT,
    label: Optional[str] = None,
    *,
    fixed_amount: Optional[int] = None,
    minimum: Optional[int] = None,
) -> Layer:
    """
    A management layer.

    Args:
        variant: The type of management
        label: Optional label that further describes the layer
        fixed_amount: Exact number of management members
        minimum: Minimum number of management members
    """
    return Layer(
        label=_counted_label(variant.value, label, fixed_amount, minimum),
        category=LayerCategory.MANAGEMENT,
        variant_title=variant.value,
        explanation=variant.info,
    )


def shareholder(
    variant: ShareholderType = ShareholderType.SHAREHOLDER,
    label: Optional[str] = None,
    *,
    fixed_amount: Optional[int] = None,
    minimum: Optional[int] = None,
) -> Layer:
    """
    A shareholder layer.

    Args:
        variant: The type of shareholder
        label: Optional label that further describes the layer
        fixed_amount: Exact number of shareholders
        minimum: Minimum number of shareholders
    """
    return Layer(
        label=_counted_label(variant.value, label, fixed_amount, minimum),
        category=LayerCategory.SHAREHOLDER,
        variant_title=variant.value,
        explanation=variant.info,
    )


def capital(
    variant: CapitalType = CapitalType.CAPITAL,
    label: Optional[str] = None,
    *,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> Layer:
    """
    A capital layer.

    Args:
        variant: The type of capital
        label: Optional custom label, ignored when an amount is given
        minimum: Minimum capital in Euro
        maximum: Maximum capital in Euro (requires minimum)
    """
    if maximum is not None and minimum is None:
        raise ValueError("maximum requires minimum")
    if minimum is not None and maximum is not None:
        text = f"{currency(minimum)} – {currency(maximum)}"
    elif minimum is not None:
        text = currency(minimum)
    else:
        text = label or variant.value
    return Layer(
        label=text,
        category=LayerCategory.CAPITAL,
        variant_title=variant.value,
        explanation=variant.info,
    )


def stocks(label: Optional[str] = None, *, minimum: int) -> Layer:
    """A stocks layer with the minimum total value of the stocks in Euro."""
    amount = min_currency(minimum)
    return Layer(
        label=f"{label} ({amount})" if label else amount,
        category=LayerCategory.STOCKS,
        variant_title="Stocks",
        explanation=STOCKS_INFO,
    )


def ship() -> Layer:
    """The one ship a partner shipping company is based on."""
    return Layer(
        label="One Ship",
        category=LayerCategory.SHIP,
        variant_title="Ship",
        explanation=SHIP_INFO,
    )


def inserted_company(
    company: Company,
    role: CompanyRole,
    *,
    minimum: Optional[int] = None,
) -> Layer:
    """
    A company acting as management or shareholder of another company.

    Args:
        company: The company to be inserted
        role: The role the company performs in the host company
        minimum: Minimum number of companies or persons in the role
    """
    label = company.title if minimum is None else f"{company.title} ({plus(minimum)})"
    return Layer(
        label=label,
        category=LayerCategory.INSERTED_COMPANY,
        variant_title=company.title,
        embedded_company=company,
        role=CompanyRole(role),
    )


@dataclass(frozen=True)
class LayerStyle:
    """
    How a layer category is drawn.

    Attributes:
        color: Named background color
        dash: Dash pattern used when differentiating without color
    """
    color: str
    dash: Tuple[float, ...]


LAYER_STYLES: Dict[LayerCategory, LayerStyle] = {
    LayerCategory.SUPERVISORY_BOARD: LayerStyle(color="cyan", dash=(5,)),
    LayerCategory.MANAGEMENT: LayerStyle(color="blue", dash=(10,)),
    LayerCategory.SHAREHOLDER: LayerStyle(color="purple", dash=(20,)),
    LayerCategory.CAPITAL: LayerStyle(color="orange", dash=(30,)),
    LayerCategory.STOCKS: LayerStyle(color="green", dash=(40,)),
    LayerCategory.SHIP: LayerStyle(color="orange_brown", dash=(50,)),
    LayerCategory.INSERTED_COMPANY: LayerStyle(color="clear", dash=()),
}


def style_for(layer: Layer) -> LayerStyle:
    """Style of a layer; inserted companies are drawn like the role they fill."""
    if layer.category is LayerCategory.INSERTED_COMPANY and layer.role is not None:
        return LAYER_STYLES[layer.role.category]
    return LAYER_STYLES[layer.category]
