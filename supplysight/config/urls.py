"""
URL configuration for the SupplySight API.

Every app mounts its routes under /api/v1/.
"""
from django.urls import path, include

urlpatterns = [
    path('api/v1/', include('supplysight.catalog.urls')),
    path('api/v1/', include('supplysight.locations.urls')),
    path('api/v1/', include('supplysight.reports.urls')),
]
