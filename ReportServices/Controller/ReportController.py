from rest_framework import serializers
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from attendtrack.Helpers import parseQueryDate, renderResponse
from attendtrack.permissions import IsManager
from ReportServices.reports import daily_summary


class DailySummaryAPIView(APIView):
    permission_classes = [IsAuthenticated, IsManager]

    def get(self, request):
        day = parseQueryDate(request, 'date', required=True)
        employee_id = request.query_params.get('employee_id')
        if employee_id:
            employee_id = serializers.IntegerField().run_validation(employee_id)
        else:
            employee_id = None

        summary = daily_summary(request.user, day, employee_id)
        return renderResponse(
            date=day.isoformat(),
            team_summary=summary['team_summary'],
            employees=summary['employees'],
        )
