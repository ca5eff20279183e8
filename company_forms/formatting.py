"""Label formatting helpers for amounts shown in the company form graphic."""


def plus(amount: int) -> str:
    """Mark an amount as "equal or more", e.g. ``plus(1) == "1+"``."""
    return f"{amount}+"


def currency(amount: int) -> str:
    """Format an amount as Euro, e.g. ``currency(12345) == "€12,345.00"``."""
    return f"€{amount:,.2f}"


def min_currency(amount: int) -> str:
    """Format an amount as a minimum Euro value, e.g. ``"min. €12,345.00"``."""
    return f"min. {currency(amount)}"
