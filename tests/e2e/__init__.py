"""
E2E tests for poke-search.

These tests resolve names against the full dictionaries embedded in the
package, through the same context and CLI the tool uses.

Usage:
    pytest -m e2e tests/e2e/       # Run all E2E tests
"""
