"""
Core utilities shared across the blog API: configuration, logging setup,
password hashing, bearer tokens and the HTTP error mapping.
"""
