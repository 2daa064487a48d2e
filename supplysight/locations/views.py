import logging

from django.conf import settings
from rest_framework.decorators import api_view
from rest_framework.response import Response

from supplysight.catalog.services import CatalogService
from supplysight.core.cache_utils import WAREHOUSE_LIST_KEY_PREFIX, get_or_set
from .serializers import WarehouseSerializer

logger = logging.getLogger('supplysight.locations')


def get_warehouse_data():
    """Serialized warehouse list, served from cache when possible"""
    def load():
        warehouses = CatalogService().list_warehouses()
        return [dict(row) for row in WarehouseSerializer(warehouses, many=True).data]

    data, hit = get_or_set(WAREHOUSE_LIST_KEY_PREFIX, load, settings.SUPPLYSIGHT_WAREHOUSE_CACHE_TTL)
    return data, hit


@api_view(['GET'])
def warehouse_list(request):
    """List all warehouses"""
    data, hit = get_warehouse_data()
    logger.debug(f"Warehouse list served ({'cache' if hit else 'store'}), {len(data)} warehouses")
    response = Response(data)
    response['X-Cache'] = 'HIT' if hit else 'MISS'
    return response


@api_view(['GET'])
def warehouse_detail(request, code):
    """Retrieve a warehouse by code"""
    warehouse = CatalogService().get_warehouse(code)
    return Response(WarehouseSerializer(warehouse).data)
