"""
Account Service — root package.

This package contains the FastAPI app entry point (main.py), the account API
routes, the account use cases, the user domain model and its MongoDB
repository.
"""
