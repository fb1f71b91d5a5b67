"""
High-level use cases for the blog API.

Each service orchestrates the store to implement business rules (ownership
checks, cascade deletes, likes). Routers call these services instead of
manipulating the document directly.
"""
