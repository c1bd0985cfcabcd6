from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from attendtrack.Helpers import renderResponse
from attendtrack.permissions import IsManager
from UserServices.Serializers import TeamMemberSerializer
from UserServices.models import User


class TeamAPIView(APIView):
    permission_classes = [IsAuthenticated, IsManager]

    def get(self, request):
        team = User.objects.filter(manager=request.user).order_by('username')
        return renderResponse(data=TeamMemberSerializer(team, many=True).data)
