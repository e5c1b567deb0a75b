from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for custom User model."""

    list_display = [
        'username',
        'email',
        'is_staff',
        'date_joined',
        'last_login',
    ]
    list_filter = ['is_staff', 'is_superuser', 'is_active']
