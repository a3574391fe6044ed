"""Playwright UI automation: framework helpers, page objects and live scenarios."""
