from rest_framework import serializers
from CheckInServices.models import CheckIn


class TodayCheckInSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source='client.name', read_only=True)

    class Meta:
        model = CheckIn
        fields = ['id', 'checkin_time', 'checkout_time', 'status', 'client_name']


class TeamCheckInSerializer(TodayCheckInSerializer):
    employee_name = serializers.CharField(source='employee.name', read_only=True)

    class Meta(TodayCheckInSerializer.Meta):
        fields = TodayCheckInSerializer.Meta.fields + ['employee_name']
