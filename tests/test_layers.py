"""
Tests for layer constructors, labels and styles.

Run with: pytest tests/test_layers.py -v
"""

import pytest

from company_forms.formatting import currency, min_currency, plus
from company_forms.models import (
    LAYER_STYLES,
    CapitalType,
    CompanyRole,
    LayerCategory,
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


# ============================================================================
# Formatting Tests
# ============================================================================

class TestFormatting:
    """Test amount formatting."""

    def test_plus(self):
        assert plus(1) == "1+"
        assert plus(7) == "7+"

    def test_currency(self):
        assert currency(1) == "€1.00"
        assert currency(25000) == "€25,000.00"
        assert currency(15000000) == "€15,000,000.00"

    def test_min_currency(self):
        assert min_currency(50000) == "min. €50,000.00"


# ============================================================================
# Counted Layer Tests
# ============================================================================

class TestManagementAndShareholder:
    """Test labels of management and shareholder layers."""

    def test_default_label_is_variant_title(self):
        """Test that a layer without label or amount shows its type."""
        layer = management(ManagementType.BOARD)

        assert layer.label == "Board"
        assert layer.variant_title == "Board"
        assert layer.category is LayerCategory.MANAGEMENT
        assert layer.explanation == ManagementType.BOARD.info

    def test_minimum_only(self):
        """Test that a bare minimum is shown as N+."""
        assert shareholder(minimum=2).label == "2+"

    def test_label_with_minimum(self):
        """Test that label and minimum combine."""
        layer = shareholder(ShareholderType.SHAREHOLDER, "Mariner", minimum=2)

        assert layer.label == "Mariner (2+)"
        assert layer.variant_title == "Shareholder"

    def test_fixed_amount(self):
        """Test exact amounts with and without label."""
        assert management(fixed_amount=1).label == "1"
        assert management(ManagementType.MANAGEMENT, "Proprietor", fixed_amount=1).label == "Proprietor (1)"

    def test_custom_label_only(self):
        """Test that a custom label replaces the type name."""
        assert management(ManagementType.BOARD, "Trustee").label == "Trustee"

    def test_fixed_amount_and_minimum_are_exclusive(self):
        """Test that both amounts at once are rejected."""
        with pytest.raises(ValueError):
            shareholder(fixed_amount=2, minimum=2)

    def test_every_type_has_an_explanation(self):
        """Test that all sub-types are documented."""
        for variant in ManagementType:
            assert variant.info
        for variant in ShareholderType:
            assert variant.info
        for variant in CapitalType:
            assert variant.info


# ============================================================================
# Capital and Stocks Tests
# ============================================================================

class TestCapitalAndStocks:
    """Test capital and stocks labels."""

    def test_capital_default(self):
        layer = capital()

        assert layer.label == "Capital"
        assert layer.category is LayerCategory.CAPITAL

    def test_capital_type(self):
        assert capital(CapitalType.PRIVATE_ASSETS).label == "Private Assets"

    def test_capital_minimum(self):
        assert capital(minimum=25000).label == "€25,000.00"

    def test_capital_range(self):
        assert capital(minimum=1, maximum=24999).label == "€1.00 – €24,999.00"

    def test_capital_maximum_requires_minimum(self):
        with pytest.raises(ValueError):
            capital(maximum=24999)

    def test_stocks(self):
        layer = stocks(minimum=50000)

        assert layer.label == "min. €50,000.00"
        assert layer.category is LayerCategory.STOCKS

    def test_stocks_with_label(self):
        layer = stocks("External capital management", minimum=125000)

        assert layer.label == "External capital management (min. €125,000.00)"


# ============================================================================
# Other Layer Tests
# ============================================================================

class TestOtherLayers:
    """Test supervisory board, ship and inserted companies."""

    def test_supervisory_board(self):
        assert supervisory_board().label == "Supervisory Board"

        layer = supervisory_board("From 500 employees")

        assert layer.label == "From 500 employees"
        assert layer.variant_title == "Supervisory Board"
        assert layer.category is LayerCategory.SUPERVISORY_BOARD

    def test_ship(self):
        layer = ship()

        assert layer.label == "One Ship"
        assert layer.category is LayerCategory.SHIP

    def test_inserted_company(self, limited_liability_company):
        """Test that an inserted company is labeled with the company title."""
        layer = inserted_company(limited_liability_company, CompanyRole.SHAREHOLDER)

        assert layer.label == "GmbH"
        assert layer.variant_title == "GmbH"
        assert layer.category is LayerCategory.INSERTED_COMPANY
        assert layer.role is CompanyRole.SHAREHOLDER
        assert layer.embedded_company.id == limited_liability_company.id

    def test_inserted_company_with_minimum(self, limited_liability_company):
        layer = inserted_company(limited_liability_company, CompanyRole.MANAGEMENT, minimum=2)

        assert layer.label == "GmbH (2+)"

    def test_role_category(self):
        assert CompanyRole.MANAGEMENT.category is LayerCategory.MANAGEMENT
        assert CompanyRole.SHAREHOLDER.category is LayerCategory.SHAREHOLDER


# ============================================================================
# Style Tests
# ============================================================================

class TestLayerStyles:
    """Test the presentation lookup."""

    def test_every_category_has_a_style(self):
        assert set(LAYER_STYLES) == set(LayerCategory)

    def test_plain_layer_style(self):
        assert style_for(management()).color == "blue"
        assert style_for(supervisory_board()).dash == (5,)

    def test_inserted_company_uses_role_style(self, limited_liability_company):
        """Test that an inserted company is drawn like the role it fills."""
        as_management = inserted_company(limited_liability_company, CompanyRole.MANAGEMENT)
        as_shareholder = inserted_company(limited_liability_company, CompanyRole.SHAREHOLDER)

        assert style_for(as_management) == LAYER_STYLES[LayerCategory.MANAGEMENT]
        assert style_for(as_shareholder) == LAYER_STYLES[LayerCategory.SHAREHOLDER]
