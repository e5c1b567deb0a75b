"""
Accounts app serializers

Registration, login and current-user payloads.
"""
from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Public view of an account: id and username only."""

    class Meta:
        model = User
        fields = ['id', 'username']
        read_only_fields = fields


class RegisterSerializer(serializers.ModelSerializer):
    """
    Serializer for creating an account.

    Password is write-only and stored hashed.
    """

    class Meta:
        model = User
        fields = ['id', 'username', 'password']
        read_only_fields = ['id']
        extra_kwargs = {
            'password': {'write_only': True},
        }

    def validate_password(self, value):
        validate_password(value, user=User(username=self.initial_data.get('username', '')))
        return value

    def create(self, validated_data):
        """Create user with hashed password."""
        return User.objects.create_user(
            username=validated_data['username'],
            password=validated_data['password'],
        )


class LoginSerializer(serializers.Serializer):
    """Check a username/password pair and expose the matching user."""

    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        user = authenticate(
            request=self.context.get('request'),
            username=attrs['username'],
            password=attrs['password'],
        )
        if user is None:
            raise AuthenticationFailed("Wrong username or password.")
        attrs['user'] = user
        return attrs
