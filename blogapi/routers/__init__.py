"""
FastAPI routers grouped by domain (auth/users, posts, comments).
"""
