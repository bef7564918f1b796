"""
auth — User authentication module.

Provides:
  • JWT session token creation & verification (python-jose, HS256)
  • Password hashing (bcrypt, 10 rounds)
  • Register / Login service and API routes
  • ``get_current_user`` FastAPI dependency
"""
