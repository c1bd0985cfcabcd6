from rest_framework import serializers
from .models import CheckIn


class CheckInRequestSerializer(serializers.Serializer):
    client_id = serializers.IntegerField(
        error_messages={'required': 'Client ID and location are required', 'null': 'Client ID and location are required'},
    )
    latitude = serializers.FloatField(
        error_messages={'required': 'Client ID and location are required', 'null': 'Client ID and location are required'},
    )
    longitude = serializers.FloatField(
        error_messages={'required': 'Client ID and location are required', 'null': 'Client ID and location are required'},
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    employee_id = serializers.IntegerField(required=False, allow_null=True)

    def validate_latitude(self, value):
        if not -90 <= value <= 90:
            raise serializers.ValidationError("Latitude must be between -90 and 90")
        return value

    def validate_longitude(self, value):
        if not -180 <= value <= 180:
            raise serializers.ValidationError("Longitude must be between -180 and 180")
        return value


class CheckInSerializer(serializers.ModelSerializer):
    employee_id = serializers.IntegerField(read_only=True)
    client_id = serializers.IntegerField(read_only=True)
    client_name = serializers.CharField(source='client.name', read_only=True)

    class Meta:
        model = CheckIn
        fields = [
            'id', 'employee_id', 'client_id', 'client_name',
            'latitude', 'longitude', 'distance_from_client', 'notes',
            'status', 'checkin_time', 'checkout_time',
        ]


class CheckInHistorySerializer(CheckInSerializer):
    client_address = serializers.CharField(source='client.address', read_only=True, allow_null=True)

    class Meta(CheckInSerializer.Meta):
        fields = CheckInSerializer.Meta.fields + ['client_address']
