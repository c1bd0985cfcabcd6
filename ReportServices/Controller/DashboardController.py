from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from attendtrack.Helpers import renderResponse
from attendtrack.permissions import IsManager
from ClientServices.Serializers import ClientSimpleSerializer
from ReportServices.Serializers import TeamCheckInSerializer, TodayCheckInSerializer
from ReportServices.reports import employee_dashboard, manager_dashboard
from UserServices.Serializers import TeamMemberSerializer


class ManagerDashboardAPIView(APIView):
    permission_classes = [IsAuthenticated, IsManager]

    def get(self, request):
        stats = manager_dashboard(request.user)
        return renderResponse(data={
            'team_size': len(stats['team_members']),
            'team_members': TeamMemberSerializer(stats['team_members'], many=True).data,
            'today_checkins': TeamCheckInSerializer(stats['today_checkins'], many=True).data,
            'active_checkins': stats['active_checkins'],
        })


class EmployeeDashboardAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        stats = employee_dashboard(request.user)
        return renderResponse(data={
            'today_checkins': TodayCheckInSerializer(stats['today_checkins'], many=True).data,
            'assigned_clients': ClientSimpleSerializer(stats['assigned_clients'], many=True).data,
            'week_stats': stats['week_stats'],
        })
