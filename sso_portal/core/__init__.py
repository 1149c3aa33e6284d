"""Core portal logic, independent of any CLI or persistence layer.

Module Structure:
    - portal/ : SSO portal API client (token exchange, listings, credentials)
"""
