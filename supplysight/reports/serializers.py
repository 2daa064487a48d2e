from rest_framework import serializers

from supplysight.catalog.models import ALL
from .kpis import DEFAULT_RANGE


class KpiSerializer(serializers.Serializer):
    stock = serializers.IntegerField(read_only=True)
    demand = serializers.IntegerField(read_only=True)


class DashboardQuerySerializer(serializers.Serializer):
    """Query parameters of the dashboard endpoint"""
    range = serializers.CharField(required=False, default=DEFAULT_RANGE)
    search = serializers.CharField(required=False, allow_blank=True, default='', trim_whitespace=False)
    warehouse = serializers.CharField(required=False, allow_blank=True, default=ALL)
    status = serializers.CharField(required=False, allow_blank=True, default=ALL)
    # Left as text; out-of-range or garbage pages are clamped, not rejected
    page = serializers.CharField(required=False, default='1')
    selected = serializers.CharField(required=False, allow_blank=True, default='')
