from rest_framework import serializers

from .domain.photo import PhotoType

ORIENTATION_CHOICES = [(t.value, t.value) for t in PhotoType]


class MeasurePhotoSerializer(serializers.Serializer):
    """Single photo upload."""
    image = serializers.ImageField(required=True)
    orientation = serializers.ChoiceField(choices=ORIENTATION_CHOICES, required=False, default=PhotoType.HORIZONTAL.value)

    def validate_image(self, value):
        if value.size > 10 * 1024 * 1024:  # 10MB
            raise serializers.ValidationError("Image file too large. Maximum size is 10MB.")
        return value


class MeasurePatientSerializer(serializers.Serializer):
    """Horizontal + vertical photo pair taken for one patient."""
    horizontal_image = serializers.ImageField(required=True)
    vertical_image = serializers.ImageField(required=True)


class WhiteDotSerializer(serializers.Serializer):
    distance = serializers.FloatField()
    area = serializers.FloatField()
    angle = serializers.FloatField()
    angle_degrees = serializers.FloatField()


class EyeMeasurementSerializer(serializers.Serializer):
    pupil_area = serializers.FloatField(allow_null=True)
    white_dot = WhiteDotSerializer(allow_null=True)
    error = serializers.CharField(allow_null=True)


class PhotoMeasurementSerializer(serializers.Serializer):
    orientation = serializers.CharField()
    eyes_found = serializers.BooleanField()
    error = serializers.CharField(allow_null=True)
    left_eye = EyeMeasurementSerializer()
    right_eye = EyeMeasurementSerializer()
    pupillary_distance = serializers.FloatField(allow_null=True)
    duration = serializers.FloatField()
