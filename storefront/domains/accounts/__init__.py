"""
Accounts domain: user registration, login and request identity.
"""
