"""
Prevalence statistics of German company forms.

Sources:
    COMPANY_TYPE_SHARES: Statistisches Bundesamt (as of 2021)
    TRADE_REGISTER_SHARES: Listflix (as of 2023), KöR is a
        Körperschaft des öffentlichen Rechts (Corporation of Public Law)
"""

from typing import Dict, List, Tuple

# Percentages
COMPANY_TYPE_SHARES: Dict[str, float] = {
    "Sole Proprietor": 59.2,
    "Corporations": 23.2,
    "Partnerships": 12.1,
    "Other": 5.4,
}

TRADE_REGISTER_SHARES: Dict[str, float] = {
    "GmbH": 79.0,
    "UG (haftungsbeschränkt)": 9.5,
    "e. K.": 6.4,
    "KG": 1.5,
    "PartG": 1.1,
    "OHG": 1.1,
    "AG, SE, KGaA": 0.9,
    "e. G.": 0.5,
    "Foundation": 0.05,
    "EWIV": 0.02,
    "KöR": 0.02,
}


def ranked_shares(data: Dict[str, float]) -> List[Tuple[str, float]]:
    """Shares sorted from largest to smallest; ties keep their declaration order."""
    return sorted(data.items(), key=lambda item: item[1], reverse=True)
