from django.urls import path

from CheckInServices.Controller.CheckInController import (
    ActiveCheckInAPIView,
    AssignedClientsAPIView,
    CheckInCreateAPIView,
    CheckInHistoryAPIView,
    CheckOutAPIView,
)


urlpatterns = [
    path('checkin/', CheckInCreateAPIView.as_view(), name='checkin-create'),
    path('checkin/checkout/', CheckOutAPIView.as_view(), name='checkin-checkout'),
    path('checkin/active/', ActiveCheckInAPIView.as_view(), name='checkin-active'),
    path('checkin/history/', CheckInHistoryAPIView.as_view(), name='checkin-history'),
    path('checkin/clients/', AssignedClientsAPIView.as_view(), name='checkin-clients'),
]
