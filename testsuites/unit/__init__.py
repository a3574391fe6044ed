"""Browser-free tests for the UI framework and page objects."""
