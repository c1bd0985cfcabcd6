import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from attendtrack.Helpers import renderResponse
from UserServices.Serializers import UserSerializer

logger = logging.getLogger(__name__)


class LoginAPIView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        username = request.data.get('username')
        password = request.data.get('password')
        if not username or not password:
            return Response(
                {'success': False, 'message': 'Username and password are required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        user = authenticate(username=str(username).strip(), password=password)
        if user:
            refresh = RefreshToken.for_user(user)
            access = refresh.access_token
            access['role'] = user.role
            access['username'] = user.username
            access['manager_id'] = user.manager_id
            logger.info('User %s logged in', user.username)
            return renderResponse(
                token=str(access),
                refresh=str(refresh),
                user=UserSerializer(user).data,
            )
        logger.warning('Failed login attempt for %s', username)
        return Response(
            {'success': False, 'message': 'Invalid credentials'},
            status=status.HTTP_401_UNAUTHORIZED
        )
