"""
API package containing versioned routes and shared dependencies.

Versions live in subpackages such as ``v1``, each exposing a top‑level
``router``.  ``deps`` provides the dependencies that hand the
application's services to the route handlers.
"""
