"""
API layer for the account service.

Exposes the account endpoints (register, login, view, edit, delete) and the
bearer-token auth guard.
"""
