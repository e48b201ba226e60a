"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against live public sites"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests (need Playwright browsers installed)"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests, no browser or network required"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "sport: Tests related to the BBC Sport league table"
    )
    config.addinivalue_line(
        "markers", "search: Tests related to Wikipedia search"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add domain markers based on test location."""
    for item in items:
        parts = item.path.parts

        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Public Site UI Checks",
        "=" * 60,
        "",
    ]
