import logging

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .serializers import (
    ProductSerializer, ProductFilterSerializer,
    UpdateDemandSerializer, TransferStockSerializer
)
from .services import CatalogService

logger = logging.getLogger('supplysight.catalog')


@api_view(['GET'])
def product_list(request):
    """List products, optionally filtered by search, status and warehouse"""
    params = ProductFilterSerializer(data=request.query_params)
    params.is_valid(raise_exception=True)
    products = CatalogService().list_products(
        search=params.validated_data.get('search'),
        status=params.validated_data.get('status'),
        warehouse=params.validated_data.get('warehouse'),
    )
    return Response(ProductSerializer(products, many=True).data)


@api_view(['GET'])
def product_detail(request, pk):
    """Retrieve a single product"""
    product = CatalogService().get_product(pk)
    return Response(ProductSerializer(product).data)


@api_view(['POST'])
def product_update_demand(request, pk):
    """Set the demand of a product"""
    serializer = UpdateDemandSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Demand update for {pk} rejected: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    product = CatalogService().update_demand(pk, serializer.validated_data['demand'])
    return Response(ProductSerializer(product).data)


@api_view(['POST'])
def product_transfer_stock(request, pk):
    """Move stock of a product's sku to another warehouse; returns the source product"""
    serializer = TransferStockSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Transfer for {pk} rejected: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    product = CatalogService().transfer_stock(pk, data['from_warehouse'], data['to'], data['qty'])
    return Response(ProductSerializer(product).data)
