import logging

from rest_framework import permissions, status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import (
    MeasurePatientSerializer,
    MeasurePhotoSerializer,
    PhotoMeasurementSerializer,
)
from .domain.errors import ConstructionError
from .domain.photo import PhotoType

# Hexagonal adapters and use cases
from .application.use_cases.measure_photo import MeasurePhotoInput
from .config.container import get_measure_patient_use_case, get_measure_photo_use_case

logger = logging.getLogger(__name__)


def _construction_failed(e: ConstructionError) -> Response:
    logger.error("Photo could not be constructed: %s", e)
    return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)


class MeasurePhotoView(APIView):
    """Locate eyes, pupils and corneal reflexes in one uploaded photo."""
    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = MeasurePhotoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = get_measure_photo_use_case()
        try:
            result = use_case.execute(MeasurePhotoInput(
                image_file=serializer.validated_data['image'],
                orientation=PhotoType(serializer.validated_data['orientation']),
            ))
        except ConstructionError as e:
            return _construction_failed(e)

        return Response({
            'measurement': PhotoMeasurementSerializer(result.as_dict()).data,
        }, status=status.HTTP_200_OK)


class MeasurePatientView(APIView):
    """Measure the horizontal and vertical photos of one patient."""
    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = MeasurePatientSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = get_measure_patient_use_case()
        try:
            results = use_case.execute(
                MeasurePhotoInput(image_file=serializer.validated_data['horizontal_image']),
                MeasurePhotoInput(image_file=serializer.validated_data['vertical_image']),
            )
        except ConstructionError as e:
            return _construction_failed(e)

        return Response({
            orientation.value: PhotoMeasurementSerializer(result.as_dict()).data
            for orientation, result in results.items()
        }, status=status.HTTP_200_OK)
