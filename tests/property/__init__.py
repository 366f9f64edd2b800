"""Property tests for dalenius."""
