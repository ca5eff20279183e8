"""
Company catalog for Company Forms.

Every German legal form the library knows about, declared with the
structure syntax of company_forms.models. Alternate structures (nonprofit
variants, monistic SE, cooperatives with limited liability, ...) are not
part of the sections; they are paired with their base in
ALTERNATE_STRUCTURES and added to listings on demand.
"""

from company_forms.models.company import Company, CompanyRole, row
from company_forms.models.layers import (
    CapitalType,
    ManagementType,
    ShareholderType,
    capital,
    inserted_company,
    management,
    shareholder,
    ship,
    stocks,
    supervisory_board,
)

CHARITABLE_PURPOSE = "Charitable purpose"
JOINT_OPERATION = "Joint economic business operation"


# ============================================================================
# Partnerships
# ============================================================================

EU = Company(
    id="eu",
    german_name="Einzelunternehmen",
    english_translation="Sole Proprietor",
    tidbit="Sole proprietor is the most common form of company in Germany.",
    structure=[
        shareholder(ShareholderType.SHAREHOLDER, "Proprietor", minimum=1).with_unlimited_liability(),
        capital(CapitalType.PRIVATE_ASSETS),
    ],
)

SG = Company(
    id="sg",
    german_name="Stille Gesellschaft",
    english_translation="Silent Partnership",
    tidbit=(
        "A silent partnership exists when a person invests in a company with a deposit. "
        "It is only an inside company and does not have to be disclosed, except for AGs."
    ),
    structure=[
        row(
            management(ManagementType.MANAGEMENT, "Proprietor", fixed_amount=1).with_unlimited_liability(),
            shareholder(ShareholderType.LIMITED_PARTNER, "Investor", fixed_amount=1).with_limited_liability(),
        ),
        row(
            capital(CapitalType.PRIVATE_ASSETS),
            capital(CapitalType.PRIVATE_DEPOSITS),
        ),
    ],
)

PR = Company(
    id="pr",
    german_name="Partenreederei",
    english_translation="Partner Shipping Company",
    reason="Seafaring",
    tidbit="Since 2013, partner shipping companies cannot be created anymore.",
    structure=[
        shareholder(ShareholderType.SHAREHOLDER, "Mariner", minimum=2).with_unlimited_liability(),
        ship(),
    ],
)

EK = Company(
    id="ek",
    abbreviation="e. K.",
    german_name="Eingetragener Kaufmann (e. Kfm.) / Eingetragene Kauffrau (e. Kfr.)",
    english_translation="Registered Merchant",
    reason="Trade",
    structure=[
        shareholder(ShareholderType.SHAREHOLDER, "Merchant", minimum=1).with_unlimited_liability(),
        capital(CapitalType.PRIVATE_ASSETS),
    ],
)

PART_G = Company(
    id="partg",
    abbreviation="PartG",
    german_name="Partnerschaftsgesellschaft",
    english_translation="Partnership Company",
    structure=[
        shareholder(ShareholderType.SHAREHOLDER, "Freelancer", minimum=2).with_unlimited_liability(),
        capital(CapitalType.PRIVATE_ASSETS),
    ],
)

PART_G_MBB = Company(
    id="partg-mbb",
    abbreviation="PartG mbB",
    german_name="Partnerschaftsgesellschaft mit beschränkter Berufshaftung",
    english_translation="Partnership Company with Limited Professional Liability",
    tidbit="Only freelancers with professional indemnity insurance can found a PartG mbB.",
    structure=[
        shareholder(ShareholderType.SHAREHOLDER, "Freelancer", minimum=2).with_limited_liability(),
        capital(CapitalType.PRIVATE_ASSETS),
    ],
)

GBR = Company(
    id="gbr",
    abbreviation="GbR",
    german_name="Gesellschaft bürgerlichen Rechts",
    english_translation="Civil Law Partnership",
    tidbit="When a GbR is involved in trade, it converts to an OHG.",
    structure=[
        shareholder(minimum=2).with_unlimited_liability(),
        capital(CapitalType.PRIVATE_ASSETS),
    ],
)

OHG = Company(
    id="ohg",
    abbreviation="OHG",
    german_name="Offene Handelsgesellschaft",
    english_translation="General Partnership",
    reason="Trade",
    structure=[
        shareholder(minimum=2).with_unlimited_liability(),
        capital(CapitalType.PRIVATE_ASSETS),
    ],
)

KG = Company(
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

EWIV = Company(
    id="ewiv",
    abbreviation="EWIV",
    german_name="Europäische wirtschaftliche Interessenvereinigung",
    english_translation="European Economic Interest Grouping (EEIG)",
    tidbit=(
        "The shareholders of an EWIV have to be from at least two countries of the "
        "European Economic Area. An EWIV can employ a maximum of 500 people."
    ),
    structure=[
        shareholder(minimum=2).with_unlimited_liability(),
        capital(CapitalType.NO_COMPULSORY_CAPITAL),
    ],
)


# ============================================================================
# Corporations
# ============================================================================

UG = Company(
    id="ug",
    abbreviation="UG (haftungsbeschränkt)",
    german_name="Unternehmergesellschaft (haftungsbeschränkt)",
    english_translation="Entrepreneurial Company with Limited Liability",
    tidbit=(
        "The UG (haftungsbeschränkt) is not a separate type of company, "
        "but a variant of the GmbH with lower capital."
    ),
    structure=[
        shareholder(minimum=1).with_limited_liability(),
        capital(minimum=1, maximum=24999),
    ],
)

GUG = Company(
    id="gug",
    abbreviation="gUG (haftungsbeschränkt)",
    german_name="Gemeinnützige Unternehmergesellschaft (haftungsbeschränkt)",
    english_translation="Nonprofit Entrepreneurial Company with Limited Liability",
    reason=CHARITABLE_PURPOSE,
    tidbit=(
        "The gUG (haftungsbeschränkt) is not a separate type of company, "
        "but a variant of the gGmbH with lower capital."
    ),
    structure=[
        shareholder(minimum=1).with_limited_liability(),
        capital(minimum=1, maximum=24999),
    ],
)

GMBH = Company(
    id="gmbh",
    abbreviation="GmbH",
    german_name="Gesellschaft mit beschränkter Haftung",
    english_translation="Limited Liability Company",
    structure=[
        supervisory_board("From 500 employees"),
        shareholder(minimum=1).with_limited_liability(),
        capital(minimum=25000),
    ],
)

GGMBH = Company(
    id="ggmbh",
    abbreviation="gGmbH",
    german_name="Gemeinnützige Gesellschaft mit beschränkter Haftung",
    english_translation="Nonprofit Limited Liability Company",
    reason=CHARITABLE_PURPOSE,
    structure=[
        supervisory_board("From 500 employees"),
        shareholder(minimum=1).with_unlimited_liability(),
        capital(minimum=25000),
    ],
)

KGAA = Company(
    id="kgaa",
    abbreviation="KGaA",
    german_name="Kommanditgesellschaft auf Aktien",
    english_translation="Limited Partnership on Stocks",
    structure=[
        row(
            management(ManagementType.COMPLEMENTARY, minimum=1).with_unlimited_liability(),
            shareholder(ShareholderType.LIMITED_PARTNER, minimum=1).with_limited_liability(),
        ),
        row(
            capital(CapitalType.PRIVATE_DEPOSITS),
            stocks(minimum=50000),
        ),
    ],
)


def _stock_corporation(stock_label=None, stock_minimum=50000):
    """Supervisory board over a board/stockholder row, on top of stocks."""
    return [
        supervisory_board(),
        row(
            management(ManagementType.BOARD).with_unlimited_liability(),
            shareholder(ShareholderType.STOCKHOLDER).with_limited_liability(),
        ),
        stocks(stock_label, minimum=stock_minimum),
    ]


AG = Company(
    id="ag",
    abbreviation="AG",
    german_name="Aktiengesellschaft",
    english_translation="Joint-Stock Company",
    structure=_stock_corporation(),
)

GAG = Company(
    id="gag",
    abbreviation="gAG",
    german_name="Gemeinnützige Aktiengesellschaft",
    english_translation="Nonprofit Joint-Stock Company",
    reason=CHARITABLE_PURPOSE,
    structure=_stock_corporation(),
)

INV_AG = Company(
    id="inv-ag",
    abbreviation="Inv-AG",
    german_name="Investment-Aktiengesellschaft",
    english_translation="Investment Joint-Stock Company",
    reason="Management of special assets",
    structure=_stock_corporation("External capital management", 125000),
)

INV_AG_INTERNAL = Company(
    id="inv-ag-internal",
    abbreviation="Inv-AG",
    german_name="Investment-Aktiengesellschaft",
    english_translation="Investment Joint-Stock Company",
    reason="Management of special assets",
    structure=_stock_corporation("Internal capital management", 300000),
)

REIT_AG = Company(
    id="reit-ag",
    abbreviation="REIT-AG",
    german_name="Real-Estate-Investment-Trust-Aktiengesellschaft",
    english_translation="Real-Estate-Investment-Trust Joint-Stock Company",
    reason="Property management and investments (min. 75% of capital)",
    tidbit=(
        "REIT-AGs have strict guidelines vis-à-vis their investments and their capital structure. "
        "For instance, at least 90% of profits have to be distributed to the shareholders. "
        "They must be listed on an exchange."
    ),
    structure=_stock_corporation(stock_minimum=15000000),
)

SE_TIDBIT = (
    "An SE can be managed by a dualistic system with board and supervisory board (common in Germany) "
    "or the monistic system with only a board of directors (common in countries like the UK or the US)."
)

SE = Company(
    id="se",
    abbreviation="SE",
    german_name="Societas Europaea (Europäische Gesellschaft)",
    english_translation="Societas Europaea (European Company)",
    tidbit=SE_TIDBIT,
    structure=_stock_corporation(stock_minimum=125000),
)

SE_MONISTIC = Company(
    id="se-monistic",
    abbreviation="SE",
    german_name="Societas Europaea (Europäische Gesellschaft)",
    english_translation="Societas Europaea (European Company)",
    tidbit=SE_TIDBIT,
    structure=[
        row(
            management(ManagementType.BOARD_OF_DIRECTORS).with_unlimited_liability(),
            shareholder(ShareholderType.STOCKHOLDER).with_limited_liability(),
        ),
        stocks(minimum=125000),
    ],
)


# ============================================================================
# Cooperatives
# ============================================================================

COOPERATIVE_TIDBIT = (
    "A cooperative can determine in their statute, whether cooperative members "
    "have limited or unlimited liability."
)
SCE_TIDBIT = (
    "The cooperative members of an SCE have to be from at least two countries "
    "of the European Economic Area."
)


def _cooperative(members_minimum, limited):
    """Board and supervisory board side by side over liable cooperative members."""
    members = shareholder(ShareholderType.COOPERATIVE_MEMBER, minimum=members_minimum)
    return [
        row(
            management(ManagementType.BOARD),
            supervisory_board(),
        ),
        members.with_limited_liability() if limited else members.with_unlimited_liability(),
        capital(CapitalType.NO_COMPULSORY_CAPITAL),
    ]


EG = Company(
    id="eg",
    abbreviation="e. G.",
    german_name="Eingetragene Genossenschaft",
    english_translation="Registered Cooperative",
    reason=JOINT_OPERATION,
    tidbit=COOPERATIVE_TIDBIT,
    structure=_cooperative(3, limited=False),
)

EG_MBH = Company(
    id="eg-mbh",
    abbreviation="e. G.",
    german_name="Eingetragene Genossenschaft mit beschränkter Haftung",
    english_translation="Registered Cooperative with Limited Liability",
    reason=JOINT_OPERATION,
    tidbit=COOPERATIVE_TIDBIT,
    structure=_cooperative(3, limited=True),
)

SCE = Company(
    id="sce",
    abbreviation="SCE",
    german_name="Societas Cooperativa Europaea (Europäische Genossenschaft)",
    english_translation="Societas Cooperativa Europaea (European Cooperative Society)",
    reason=JOINT_OPERATION,
    tidbit=SCE_TIDBIT,
    structure=_cooperative(5, limited=False),
)

SCE_MBH = Company(
    id="sce-mbh",
    abbreviation="SCE mbH",
    german_name="Societas Cooperativa Europaea (Europäische Genossenschaft) mit beschränkter Haftung",
    english_translation="Societas Cooperativa Europaea (European Cooperative Society) with Limited Liability",
    reason=JOINT_OPERATION,
    tidbit=SCE_TIDBIT,
    structure=_cooperative(5, limited=True),
)


# ============================================================================
# Other
# ============================================================================

FOUNDATION = Company(
    id="stiftung",
    abbreviation="Stiftung",
    german_name="Rechtsfähige Stiftung des privaten/bürgerlichen Rechts",
    english_translation="Legal Foundation of Private/Civil Law",
    reason="Foundation purpose",
    tidbit=(
        "The foundation capital was designated by the founder for a specific purpose. "
        "A foundation has no shareholders."
    ),
    structure=[
        management(ManagementType.BOARD).with_unlimited_liability(),
        capital(CapitalType.FOUNDATION_CAPITAL),
    ],
)

CLUB = Company(
    id="verein",
    abbreviation="Verein",
    german_name="Nicht eingetragener Verein",
    english_translation="Unregistered Club",
    reason="Club purpose (not economic)",
    structure=[
        management(ManagementType.BOARD),
        shareholder(ShareholderType.CLUB_MEMBER, minimum=2).with_unlimited_liability(),
        capital(CapitalType.CLUB_CAPITAL),
    ],
)

EV = Company(
    id="ev",
    abbreviation="e. V.",
    german_name="Eingetragener Verein",
    english_translation="Registered Club",
    reason="Club purpose (not economic)",
    structure=[
        management(ManagementType.BOARD),
        shareholder(ShareholderType.CLUB_MEMBER, minimum=7).with_limited_liability(),
        capital(CapitalType.CLUB_CAPITAL),
    ],
)

WV = Company(
    id="wv",
    abbreviation="w. V.",
    german_name="Wirtschaftlicher Verein",
    english_translation="Economic Club",
    reason="Club purpose (economic)",
    structure=[
        management(ManagementType.BOARD),
        shareholder(ShareholderType.CLUB_MEMBER, minimum=7).with_limited_liability(),
        capital(CapitalType.CLUB_CAPITAL),
    ],
)

VVAG = Company(
    id="vvag",
    abbreviation="VVaG",
    german_name="Versicherungsverein auf Gegenseitigkeit",
    english_translation="Mutual Insurance Association",
    reason="Insurance",
    structure=[
        row(
            supervisory_board(),
            management(ManagementType.BOARD, minimum=2),
        ),
        shareholder(ShareholderType.POLICYHOLDER).with_limited_liability(),
        capital(CapitalType.CLUB_CAPITAL),
    ],
)


# ============================================================================
# Mixed forms (examples)
# ============================================================================

def _limited_partnership_with(complementary):
    """A KG whose complementary is the given layer."""
    return [
        row(
            complementary,
            shareholder(ShareholderType.LIMITED_PARTNER, minimum=1).with_limited_liability(),
        ),
        capital(),
    ]


AG_CO_OHG = Company(
    id="ag-co-ohg",
    abbreviation="AG & Co. OHG",
    german_name="Aktiengesellschaft & Co. Offene Handelsgesellschaft",
    english_translation="Joint-Stock Company & Co. General Partnership",
    reason="Trade",
    structure=[
        inserted_company(AG, CompanyRole.MANAGEMENT, minimum=2).with_unlimited_liability(),
        capital(CapitalType.PRIVATE_ASSETS),
    ],
)

GMBH_CO_KG = Company(
    id="gmbh-co-kg",
    abbreviation="GmbH & Co. KG",
    german_name="Gesellschaft mit beschränkter Haftung & Co. Kommanditgesellschaft",
    english_translation="Limited Liability Company & Co. Limited Partnership",
    structure=_limited_partnership_with(
        inserted_company(GMBH, CompanyRole.MANAGEMENT).with_unlimited_liability()
    ),
)

EG_CO_KG = Company(
    id="eg-co-kg",
    abbreviation="e. G. & Co. KG",
    german_name="Eingetragene Genossenschaft & Co. Kommanditgesellschaft",
    english_translation="Registered Cooperative & Co. Limited Partnership",
    structure=_limited_partnership_with(
        inserted_company(EG, CompanyRole.MANAGEMENT).with_unlimited_liability()
    ),
)

KGAA_CO_KG = Company(
    id="kgaa-co-kg",
    abbreviation="KGaA & Co. KG",
    german_name="Kommanditgesellschaft auf Aktien & Co. Kommanditgesellschaft",
    english_translation="Limited Partnership on Stocks & Co. Limited Partnership",
    structure=_limited_partnership_with(
        inserted_company(KGAA, CompanyRole.MANAGEMENT).with_unlimited_liability()
    ),
)

STIFTUNG_GMBH_CO_KG = Company(
    id="stiftung-gmbh-co-kg",
    abbreviation="Stiftung GmbH & Co. KG",
    german_name="Stiftung, Gesellschaft mit beschränkter Haftung & Co. Kommanditgesellschaft",
    english_translation="Foundation, Limited Liability Company & Co. Limited Partnership",
    structure=[
        row(
            inserted_company(GMBH, CompanyRole.MANAGEMENT).with_unlimited_liability(),
            inserted_company(FOUNDATION, CompanyRole.SHAREHOLDER).with_limited_liability(),
        ),
        capital(),
    ],
)


def _limited_partnership_on_stocks_with(complementary):
    """A KGaA with supervisory board whose complementary is the given layer."""
    return [
        supervisory_board(),
        row(
            complementary,
            shareholder(ShareholderType.LIMITED_PARTNER, minimum=1).with_limited_liability(),
        ),
        row(
            capital(CapitalType.PRIVATE_DEPOSITS),
            stocks(minimum=50000),
        ),
    ]


SE_CO_KGAA = Company(
    id="se-co-kgaa",
    abbreviation="SE & Co. KGaA",
    german_name="Societas Europaea & Co. Kommanditgesellschaft auf Aktien",
    english_translation="Societas Europaea & Co. Limited Partnership on Stocks",
    structure=_limited_partnership_on_stocks_with(
        inserted_company(SE, CompanyRole.MANAGEMENT).with_unlimited_liability()
    ),
)

GMBH_CO_KG_CO_KGAA = Company(
    id="gmbh-co-kg-co-kgaa",
    abbreviation="(GmbH & Co. KG) & Co. KGaA",
    german_name=(
        "(Gesellschaft mit beschränkter Haftung & Co. Kommanditgesellschaft) "
        "& Co. Kommanditgesellschaft auf Aktien"
    ),
    english_translation=(
        "(Limited Liability Company & Co. Limited Partnership) & Co. Limited Partnership on Stocks"
    ),
    structure=_limited_partnership_on_stocks_with(
        inserted_company(GMBH_CO_KG, CompanyRole.MANAGEMENT).with_unlimited_liability()
    ),
)


# ============================================================================
# Collections
# ============================================================================

PARTNERSHIPS = [EU, SG, PR, PART_G, GBR, OHG, KG, EWIV]
CORPORATIONS = [UG, GMBH, KGAA, AG, INV_AG, REIT_AG, SE]
COOPERATIVES = [EG, SCE]
OTHER = [FOUNDATION, CLUB, EV, VVAG]
MIXED_FORMS = [
    AG_CO_OHG,
    GMBH_CO_KG,
    EG_CO_KG,
    KGAA_CO_KG,
    STIFTUNG_GMBH_CO_KG,
    SE_CO_KGAA,
    GMBH_CO_KG_CO_KGAA,
]

# Exactly one alternate per base
ALTERNATE_STRUCTURES = [
    (EU, EK),
    (PART_G, PART_G_MBB),
    (UG, GUG),
    (GMBH, GGMBH),
    (AG, GAG),
    (INV_AG, INV_AG_INTERNAL),
    (SE, SE_MONISTIC),
    (EG, EG_MBH),
    (SCE, SCE_MBH),
    (EV, WV),
]
