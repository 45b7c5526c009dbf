"""
Tests for the catalog_service package: password hashing, tokens, the
bearer guard, account and product persistence, and the HTTP surface.
"""
