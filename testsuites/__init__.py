"""
Test suites package.

Kept importable so that page objects, fixtures and the in-memory browser
doubles can be shared across:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports
"""
