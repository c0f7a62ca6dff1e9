"""
URL configuration for the DVS landmark service.
"""
from django.urls import path, include
from rest_framework.response import Response
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

@api_view(['GET'])
@permission_classes([AllowAny])
def api_root(request):
    """API root endpoint with available endpoints"""
    return Response({
        'message': 'DVS Landmark API v1.0',
        'status': 'running',
        'endpoints': {
            'measurement': {
                'measure_photo': '/api/measure-photo/',
                'measure_patient': '/api/measure-patient/',
            }
        }
    })

urlpatterns = [
    path('api/', api_root, name='api_root'),
    path('api/', include('dvs_app.urls')),
]
