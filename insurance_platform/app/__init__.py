"""Application package for the insurance platform services.

It groups the pieces every service process needs at startup: settings,
database access, the account and role models, the bootstrap tasks that
seed baseline data, and the FastAPI app factories for the auth, customer
and policy services.

Notes:
    1. This module does not contain any functions or classes of its own.
    2. No disk, network, or database access occurs in this module directly.

"""
