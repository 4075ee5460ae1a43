"""Persistence implementations for pizzeria_auth, grouped by technology."""
