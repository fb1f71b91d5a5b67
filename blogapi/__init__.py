"""Blog API: users, posts, likes and comments stored in a single JSON document."""

__version__ = "0.1.0"
