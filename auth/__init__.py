"""
auth: user authentication.

Provides:
  • Signed bearer token issuance & verification (PyJWT)
  • Password hashing and strength policy (bcrypt)
  • Signup / signin API routes
  • ``get_auth_context`` FastAPI dependency
"""
