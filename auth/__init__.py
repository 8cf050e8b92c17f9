"""
auth — User authentication module.

Provides:
  • Signed token creation & verification
  • Password hashing (bcrypt, 10 rounds)
  • The ``Identity`` value decoded from a token
  • ``get_current_identity`` FastAPI dependency (the bearer-token gate)
"""
