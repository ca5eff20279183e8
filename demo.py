#!/usr/bin/env python3
"""
===============================================================================
COMPANY FORMS - DEMO SCRIPT
===============================================================================

Prints the catalog of German company forms and a composed mixed form as
text graphics.

WHAT THIS DEMO DOES:
====================
1. Lists every catalog section, filtered by an optional search query
2. Optionally inserts the alternate structures next to their base
3. Composes "<insertion> & Co. <base>" and draws its structure

Usage:
    # Full catalog and the default mixed form (GmbH & Co. KG)
    python demo.py

    # Search, with variants listed separately
    python demo.py --query gemeinn --variants

    # Another mixed form
    python demo.py --base ag --insertion se

    # Show debug logs from the library
    python demo.py --verbose

===============================================================================
"""

import argparse
import logging
import sys
from typing import List

from company_forms import Company, Row, get_catalog
from company_forms.config import get_settings, load_settings_from_env
from company_forms.models import Layer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging from settings; verbose forces DEBUG."""
    settings = get_settings()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


# ============================================================================
# DISPLAY HELPERS
# ============================================================================

LIABILITY_MARKERS = {
    "unlimited": " [■ unlimited]",
    "limited": " [□ limited]",
    "none": "",
}


def describe_layer(layer: Layer) -> str:
    text = f"{layer.label} <{layer.category.value}>"
    return text + LIABILITY_MARKERS[layer.liability.value]


def draw_structure(nodes: List, indent: int = 2) -> List[str]:
    """Render a structure as indented text lines, rows as ' | ' joined cells."""
    lines = []
    pad = " " * indent
    for node in nodes:
        if isinstance(node, Row):
            cells = []
            for child in node.children:
                if isinstance(child, Row):
                    cells.append("(" + " | ".join(describe_layer(layer) for layer in child.iter_layers()) + ")")
                else:
                    cells.append(describe_layer(child))
            lines.append(pad + " | ".join(cells))
        else:
            lines.append(pad + describe_layer(node))
    return lines


def print_company(company: Company):
    print(f"\n  {company.title}")
    if company.subtitle:
        print(f"  {company.subtitle}")
    print(f"  ({company.english_translation})")
    for line in draw_structure(company.structure, indent=4):
        print(line)


def print_section(title: str):
    """Print section header."""
    print("\n" + "-" * 60)
    print(f"  {title}")
    print("-" * 60)


# ============================================================================
# MAIN
# ============================================================================

def main():
    parser = argparse.ArgumentParser(description="Company Forms demo")
    parser.add_argument("--query", default="", help="Search query for the catalog listing")
    parser.add_argument("--variants", action="store_true", help="List alternate structures")
    parser.add_argument("--translate", action="store_true", help="Use English names")
    parser.add_argument("--base", default=None, help="Catalog id of the base company")
    parser.add_argument("--insertion", default=None, help="Catalog id of the inserted company")
    parser.add_argument("--env-file", default=".env", help="Optional dotenv file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logs")
    args = parser.parse_args()

    load_settings_from_env(args.env_file)
    setup_logging(args.verbose)
    settings = get_settings()
    catalog = get_catalog()

    logger.info("Company Forms demo")
    logger.info(f"  Environment: {settings.environment}")

    show_variants = args.variants or settings.show_company_variants
    translate = args.translate or settings.translate_names

    for section in catalog.browse(args.query, show_variants=show_variants, translate_names=translate):
        print_section(section.title)
        if not section.entries:
            print("  (no matches)")
        for entry in section.entries:
            abbreviation = f" [{entry.company.abbreviation}]" if entry.company.abbreviation else ""
            print(f"  - {entry.name}{abbreviation}")

    try:
        mixed = catalog.compose(args.base, args.insertion)
    except KeyError as e:
        logger.error(f"Unknown company id: {e}")
        sys.exit(1)

    print_section("Mixed Forms Builder")
    print_company(mixed)
    print()


if __name__ == "__main__":
    main()
