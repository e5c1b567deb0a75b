"""
Accounts app permissions

Object-level ownership checks.
"""
from rest_framework import permissions


class IsOwner(permissions.BasePermission):
    """
    Allow access only to objects owned by the requesting user.

    Querysets are already filtered by owner, so this is the second line:
    an object that slips through still cannot be read or mutated.
    """

    def has_object_permission(self, request, view, obj):
        owner_id = getattr(obj, 'user_id', None)
        return owner_id is not None and owner_id == request.user.id
