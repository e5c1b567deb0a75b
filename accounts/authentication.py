"""
Accounts app authentication

Bearer token authentication backed by DRF's authtoken table.
"""
from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """
    Accept ``Authorization: Bearer <key>`` instead of DRF's ``Token <key>``.

    The keyword is also what ends up in the WWW-Authenticate header, which
    makes DRF answer unauthenticated requests with 401 rather than 403.
    """

    keyword = 'Bearer'
