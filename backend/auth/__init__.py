"""
auth/
-----
Token issuing for the login endpoint.
"""
