from django.urls import path
from ReportServices.Controller import DashboardController, ReportController

urlpatterns = [
    path('dashboard/stats/', DashboardController.ManagerDashboardAPIView.as_view(), name='dashboard-stats'),
    path('dashboard/employee/', DashboardController.EmployeeDashboardAPIView.as_view(), name='dashboard-employee'),
    path('reports/daily-summary/', ReportController.DailySummaryAPIView.as_view(), name='reports-daily-summary'),
]
