"""
Site checks package.

Browser-driven checks of rendered content on public websites:
  - ui_testing: Playwright framework, page objects and live scenarios
  - unit: offline tests for the framework, no browser required

Kept importable so `run_tests.py` and IDEs can resolve modules.
"""

__version__ = "1.0.0"
