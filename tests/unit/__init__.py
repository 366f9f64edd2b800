"""Unit tests for dalenius."""
