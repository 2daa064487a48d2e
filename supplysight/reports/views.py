import logging

from rest_framework.decorators import api_view
from rest_framework.response import Response

from supplysight.catalog.models import ALL
from supplysight.catalog.serializers import ProductSerializer
from supplysight.locations.views import get_warehouse_data
from .dashboard import DashboardState
from .kpis import DEFAULT_RANGE, generate_kpis
from .serializers import DashboardQuerySerializer, KpiSerializer

logger = logging.getLogger('supplysight.reports')


@api_view(['GET'])
def kpi_list(request):
    """Daily stock/demand points for ?range=7d|14d|30d"""
    range_token = request.query_params.get('range', DEFAULT_RANGE)
    points = generate_kpis(range_token)
    return Response(KpiSerializer(points, many=True).data)


@api_view(['GET'])
def dashboard(request):
    """
    Everything the dashboard page renders in one response:
    summary cards, trend chart, one page of products, warehouses and,
    when a product is selected, its transfer targets.
    """
    params = DashboardQuerySerializer(data=request.query_params)
    params.is_valid(raise_exception=True)
    query = params.validated_data

    state = DashboardState(
        range_token=query['range'],
        search=query['search'],
        warehouse=query['warehouse'] or ALL,
        status=query['status'] or ALL,
        page=query['page'],
    )
    if query['selected']:
        state.select(query['selected'])

    page = state.products_page()
    page['results'] = ProductSerializer(page['results'], many=True).data
    warehouses, _ = get_warehouse_data()

    logger.debug(
        f"Dashboard served: range={state.range}, page {page['page']}/{page['total_pages']}, "
        f"selected={state.selected.id if state.selected else None}"
    )
    return Response({
        'range': state.range,
        'summary': state.summary(),
        'chart': state.chart(),
        'products': page,
        'warehouses': warehouses,
        'selected': ProductSerializer(state.selected).data if state.selected else None,
        'transfer_targets': state.transfer_targets(),
    })
