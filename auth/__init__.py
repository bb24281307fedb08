"""
auth — User authentication module.

Provides:
  • JWT session token creation & verification (PyJWT, HS256)
  • Password hashing (bcrypt with salt)
  • ``UserStore`` and the ``AuthService`` register / login flows
  • Register / Login API routes
  • ``get_current_user_id`` FastAPI dependency
"""
