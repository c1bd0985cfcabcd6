from django.urls import path
from UserServices.Controller import AuthController
from UserServices.Controller import UserController
from rest_framework_simplejwt.views import TokenRefreshView

urlpatterns = [
    path('auth/login/', AuthController.LoginAPIView.as_view(), name='jwt-login'),
    path('users/team/', UserController.TeamAPIView.as_view(), name='users-team'),
]
urlpatterns += [
    path('auth/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
]
