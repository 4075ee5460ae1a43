"""Application layer - use cases orchestrating domain and auth infrastructure."""
