"""
Dashboard state and derived views.

DashboardState holds the filter, pagination, range and selection state of
one dashboard and derives what it shows from the catalog. After every
successful mutation it refetches the product list and the selected product
from the store; nothing relies on a cache being invalidated behind its back.
"""
import logging

from supplysight.catalog.models import ALL
from supplysight.catalog.services import CatalogService
from supplysight.core.exceptions import InvalidInput, SupplySightError
from supplysight.core.pagination import paginate
from .kpis import DEFAULT_RANGE, generate_kpis
from .summary import chart_series, summarize

logger = logging.getLogger(__name__)


class DashboardState:
    """Filter/pagination/selection state plus the data fetched for it"""

    def __init__(self, service=None, range_token=DEFAULT_RANGE, search='', warehouse=ALL,
                 status=ALL, page=1, rng=None):
        self.service = service or CatalogService()
        self.rng = rng
        self.range = range_token
        self.search = search
        self.warehouse = warehouse
        self.status = status
        self.page = page
        self.selected = None
        self.error = None
        self.products = []
        self.kpis = []
        self.refresh_products()
        self.refresh_kpis()

    # Fetching

    def refresh_products(self):
        self.products = self.service.list_products(
            search=self.search, status=self.status, warehouse=self.warehouse
        )
        return self.products

    def refresh_kpis(self):
        self.kpis = generate_kpis(self.range, rng=self.rng)
        return self.kpis

    def refresh_selected(self):
        if self.selected is not None:
            self.selected = self.service.get_product(self.selected.id)
        return self.selected

    # Filters reset the page to 1

    def set_search(self, search):
        self.search = search or ''
        self.page = 1
        self.refresh_products()

    def set_warehouse(self, warehouse):
        self.warehouse = warehouse or ALL
        self.page = 1
        self.refresh_products()

    def set_status(self, status):
        self.status = status or ALL
        self.page = 1
        self.refresh_products()

    def set_page(self, page):
        self.page = page

    def set_range(self, range_token):
        self.range = range_token
        self.refresh_kpis()

    def select(self, product_id):
        """Select a product for the detail drawer; raises NotFound if unknown"""
        self.selected = self.service.get_product(product_id)
        self.error = None
        return self.selected

    def clear_selection(self):
        self.selected = None
        self.error = None

    # Derived views

    def products_page(self):
        return paginate(self.products, self.page)

    def summary(self):
        """Totals over the selected product if any, else over the KPI series"""
        source = [self.selected] if self.selected is not None else self.kpis
        return summarize(source)

    def chart(self):
        return chart_series(self.kpis)

    def warehouse_codes(self):
        codes = {w.code.strip() for w in self.service.list_warehouses() if w.code and w.code.strip()}
        return sorted(codes)

    def transfer_targets(self):
        """Warehouse codes the selected product can be transferred to"""
        if self.selected is None:
            return []
        return [code for code in self.warehouse_codes() if code != self.selected.warehouse]

    # Mutations on the selected product

    def _run_mutation(self, action, description):
        if self.selected is None:
            self.error = 'No product selected'
            return None
        try:
            action()
        except SupplySightError as exc:
            self.error = exc.message
            logger.warning(f"{description} on {self.selected.id} failed: {exc.message}")
            return None

        self.error = None
        self.refresh_products()
        return self.refresh_selected()

    def update_demand(self, demand):
        """Update the selected product's demand, then refetch. Returns the product or None."""
        return self._run_mutation(
            lambda: self.service.update_demand(self.selected.id, demand),
            'Demand update',
        )

    def transfer_stock(self, to_warehouse, qty):
        """Transfer from the selected product's warehouse, then refetch. Returns the product or None."""
        def action():
            if not to_warehouse:
                raise InvalidInput('Select a destination warehouse')
            self.service.transfer_stock(self.selected.id, self.selected.warehouse, to_warehouse, qty)

        return self._run_mutation(action, 'Transfer')
