"""
Tests package for Company Forms.

This package contains tests for:
- Structure model and builder (test_structure.py)
- Layer constructors and styles (test_layers.py)
- Company entity (test_company.py)
- Alternate structures and variants (test_variants.py)
- Mixed-form composition (test_composer.py)
- Catalog, sections and statistics (test_catalog.py)
- Settings (test_settings.py)
- Demo script (test_demo.py)

Run tests with:
    pytest tests/

Or run specific test files:
    pytest tests/test_composer.py -v
"""
