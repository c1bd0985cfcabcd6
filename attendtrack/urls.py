from django.urls import path, include

urlpatterns = [
    path('api/', include('UserServices.urls')),
    path('api/', include('CheckInServices.urls')),
    path('api/', include('ReportServices.urls')),
]
