"""Pizzeria backend - customer and worker authentication.

Layers:
- domain: Customer/Worker principals, Address, credential store interfaces
- application: AuthenticationService orchestrating sign-in and registration
- infrastructure: SQLAlchemy models and repositories
- presentation: FastAPI application and Typer CLI
"""
