from django.urls import path
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from . import views

app_name = 'dvs_app'

@api_view(['GET'])
@permission_classes([AllowAny])
def api_test(request):
    """Test endpoint to check if API is working"""
    return Response({
        'message': 'DVS landmark API is working!',
        'version': '1.0.0',
        'endpoints_available': True
    })

urlpatterns = [
    # Test endpoint
    path('test/', api_test, name='api_test'),

    # Measurement endpoints
    path('measure-photo/', views.MeasurePhotoView.as_view(), name='measure_photo'),
    path('measure-patient/', views.MeasurePatientView.as_view(), name='measure_patient'),
]
