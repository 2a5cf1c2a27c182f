"""Core configuration and security helpers shared by the platform services.

Modules:
    config: Environment-driven settings and the cached `get_settings` accessor.
    security: bcrypt password hashing and verification.

"""
