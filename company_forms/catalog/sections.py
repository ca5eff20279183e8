"""Named groups of the catalog and the candidate lists of the mixed forms builder."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from company_forms.catalog import companies as c
from company_forms.models.company import Company


class CatalogSection(BaseModel):
    """
    One named group of companies.

    Attributes:
        title: Section title
        footer: Optional explanation shown below the section
        companies: Companies in display order
    """
    model_config = ConfigDict(frozen=True)

    title: str
    footer: Optional[str] = None
    companies: List[Company]


SECTIONS = [
    CatalogSection(
        title="Partnerships",
        footer=(
            "Partnerships are companies, where the focus lies on the partner's connection "
            "and their respective liability."
        ),
        companies=c.PARTNERSHIPS,
    ),
    CatalogSection(
        title="Corporations",
        footer="Corporations are structured around their capital (which may be divided into stocks).",
        companies=c.CORPORATIONS,
    ),
    CatalogSection(
        title="Cooperatives",
        footer=(
            "Cooperatives are a union of people, who have a joint economic business operation "
            "that support the member's aims."
        ),
        companies=c.COOPERATIVES,
    ),
    CatalogSection(
        title="Other",
        companies=c.OTHER,
    ),
    CatalogSection(
        title="Mixed Forms (Examples)",
        footer=(
            "Companies can act as manager or shareholder of another company. For instance, "
            "at a GmbH & Co. KG, a GmbH is the complementary of the KG. This enables the "
            "benefits of a KG without a person having unlimited liability."
        ),
        companies=c.MIXED_FORMS,
    ),
]

# Companies offered as "<insertion> & Co. <base>"
MIXED_FORM_INSERTION_CANDIDATES = [
    c.KG, c.EWIV, c.UG, c.GUG, c.GMBH, c.GGMBH, c.GMBH_CO_KG, c.KGAA,
    c.AG, c.GAG, c.SE, c.EG, c.SCE, c.FOUNDATION, c.EV,
]
MIXED_FORM_BASE_CANDIDATES = [
    c.OHG, c.KG, c.UG, c.GUG, c.GMBH, c.GGMBH, c.KGAA, c.AG, c.GAG, c.SE,
]
