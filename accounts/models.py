"""
Accounts app models

Custom User model. Every library entity (skills, job tags, experiences,
jobs) hangs off a user and is removed with it.
"""
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    Tracker account.

    Only ``username`` and the hashed ``password`` are required; the rest of
    AbstractUser's fields stay optional so the admin keeps working.
    """

    def __str__(self):
        return self.username

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
