"""
Pytest configuration and shared fixtures for Company Forms tests.

This file provides:
- Hand-built companies independent of the static catalog
- A small alternate registry over those companies
- Settings cache isolation
"""

import pytest

from company_forms.config.settings import get_settings
from company_forms.models import (
    CapitalType,
    Company,
    ManagementType,
    ShareholderType,
    capital,
    management,
    row,
    shareholder,
    supervisory_board,
)
from company_forms.variants import AlternateRegistry


# ============================================================================
# Company Fixtures
# ============================================================================

@pytest.fixture
def limited_partnership():
    """A KG: complementary and limited partner side by side, then capital."""
    return Company(
        id="test-kg",
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


@pytest.fixture
def limited_liability_company():
    """A GmbH-like corporation with a supervisory board on top."""
    return Company(
        id="test-gmbh",
        abbreviation="GmbH",
        german_name="Gesellschaft mit beschränkter Haftung",
        english_translation="Limited Liability Company",
        structure=[
            supervisory_board("From 500 employees"),
            shareholder(minimum=1).with_limited_liability(),
            capital(minimum=25000),
        ],
    )


@pytest.fixture
def nonprofit_company():
    """The nonprofit alternate of limited_liability_company."""
    return Company(
        id="test-ggmbh",
        abbreviation="gGmbH",
        german_name="Gemeinnützige Gesellschaft mit beschränkter Haftung",
        english_translation="Nonprofit Limited Liability Company",
        reason="Charitable purpose",
        tidbit="Profits stay within the company.",
        structure=[
            supervisory_board("From 500 employees"),
            shareholder(minimum=1).with_unlimited_liability(),
            capital(minimum=25000),
        ],
    )


@pytest.fixture
def sole_proprietor():
    """A company without abbreviation."""
    return Company(
        id="test-eu",
        german_name="Einzelunternehmen",
        english_translation="Sole Proprietor",
        structure=[
            shareholder(ShareholderType.SHAREHOLDER, "Proprietor", minimum=1).with_unlimited_liability(),
            capital(CapitalType.PRIVATE_ASSETS),
        ],
    )


@pytest.fixture
def registry(limited_liability_company, nonprofit_company):
    """Registry pairing the GmbH-like company with its nonprofit alternate."""
    return AlternateRegistry([(limited_liability_company, nonprofit_company)])


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild settings for each test so environment changes do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Markers
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "catalog: marks tests that use the static company catalog"
    )
