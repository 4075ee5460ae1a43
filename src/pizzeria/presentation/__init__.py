"""Presentation layer: HTTP API and operator CLI."""
