"""
Storefront backend

Product catalog, user accounts and transactional checkout over HTTP.
"""

__version__ = "0.1.0"
