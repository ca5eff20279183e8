"""
Liability model for Company Forms.

A layer either carries no liability semantics at all, or it is liable with
limited or unlimited scope vis-à-vis the company capital.
"""

from enum import Enum


class Liability(str, Enum):
    """
    Tri-state liability of a structural layer.

    NONE means the layer renders no liability indicator. UNLIMITED renders a
    filled marker, LIMITED an unfilled one.
    """
    UNLIMITED = "unlimited"
    LIMITED = "limited"
    NONE = "none"

    @property
    def is_liable(self) -> bool:
        """Check if the layer carries liability at all."""
        return self is not Liability.NONE
