from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from attendtrack.Helpers import parseQueryDate, renderResponse
from CheckInServices.Serializers import CheckInHistorySerializer, CheckInRequestSerializer, CheckInSerializer
from CheckInServices.services import CheckInService
from ClientServices.Serializers import ClientSerializer


class CheckInCreateAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, *args, **kwargs):
        serializer = CheckInRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = CheckInService.submit_check_in(
            requester=request.user,
            client_id=data['client_id'],
            latitude=data['latitude'],
            longitude=data['longitude'],
            notes=data.get('notes'),
            employee_id=data.get('employee_id'),
        )
        return renderResponse(
            message='Checked in successfully',
            status=status.HTTP_201_CREATED,
            id=result.id,
            distance_from_client=result.distance_from_client,
            distance_warning=result.distance_warning,
        )


class CheckOutAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request, *args, **kwargs):
        CheckInService.check_out(request.user.id)
        return renderResponse(message='Checked out successfully')


class ActiveCheckInAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        checkin = CheckInService.get_active_check_in(request.user.id)
        data = CheckInSerializer(checkin).data if checkin else None
        return renderResponse(data=data)


class CheckInHistoryAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        start_date = parseQueryDate(request, 'start_date')
        end_date = parseQueryDate(request, 'end_date')

        checkins = CheckInService.get_history(request.user.id, start_date, end_date)
        return renderResponse(data=CheckInHistorySerializer(checkins, many=True).data)


class AssignedClientsAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        clients = CheckInService.list_clients(request.user)
        return renderResponse(data=ClientSerializer(clients, many=True).data)
