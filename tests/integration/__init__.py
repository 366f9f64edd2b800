"""Integration tests for dalenius."""
