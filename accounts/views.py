"""
Accounts app views

Registration, token login and token validation under /auth.
"""
import logging

from rest_framework import viewsets, status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from .serializers import LoginSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)


class AuthViewSet(viewsets.GenericViewSet):
    """
    ViewSet for accounts and tokens.

    - POST /auth/       Register a new user
    - POST /auth/login/ Exchange username/password for an access token
    - GET /auth/auth/   Return the user the bearer token belongs to
    """

    serializer_class = RegisterSerializer

    def get_permissions(self):
        """
        Registration and login are open; everything else needs a token.
        """
        if self.action in ['create', 'login']:
            permission_classes = [AllowAny]
        else:
            permission_classes = [IsAuthenticated]
        return [permission() for permission in permission_classes]

    def perform_authentication(self, request):
        """
        Registration and login never resolve ``request.user``, so a stale
        bearer header left on the client does not block getting a new token.
        """
        if self.action in ['create', 'login']:
            return
        super().perform_authentication(request)

    def create(self, request, *args, **kwargs):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Registered user %s", user.username)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['post'])
    def login(self, request):
        """
        POST /auth/login/

        Returns ``{"accessToken", "username", "id"}``; the token is reused
        across logins until it is deleted.
        """
        serializer = LoginSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']
        token, _ = Token.objects.get_or_create(user=user)
        return Response({
            'accessToken': token.key,
            'username': user.username,
            'id': user.id,
        })

    @action(detail=False, methods=['get'])
    def auth(self, request):
        """
        GET /auth/auth/

        Validate the bearer token and return its user.
        """
        return Response(UserSerializer(request.user).data)
