"""
Product list filtering.

All filters are optional and combine with AND. The input list is never
modified and the result keeps its order.
"""
from .models import ALL, FILTERABLE_STATUSES


def _is_unset(value):
    return value is None or value == '' or value == ALL


def matches_search(product, search):
    """Case-insensitive substring match on name, sku or id"""
    needle = search.lower()
    return (
        needle in product.name.lower()
        or needle in product.sku.lower()
        or needle in product.id.lower()
    )


def filter_products(products, search=None, status=None, warehouse=None):
    """
    Filter products by search text, status and warehouse code.

    Args:
        products: iterable of Product
        search: substring matched against name, sku or id
        status: 'Healthy', 'Low' or 'Critical'; 'All' or empty means no filter.
            Any other value (including 'Invalid') matches nothing.
        warehouse: exact warehouse code; 'All' or empty means no filter

    Returns:
        list of matching products
    """
    filtered = list(products)

    if search:
        filtered = [p for p in filtered if matches_search(p, search)]

    if not _is_unset(warehouse):
        filtered = [p for p in filtered if p.warehouse == warehouse]

    if not _is_unset(status):
        wanted = next((s for s in FILTERABLE_STATUSES if s.value == status), None)
        filtered = [p for p in filtered if wanted is not None and p.status is wanted]

    return filtered
