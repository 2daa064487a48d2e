"""
Test suite for Reports module
Tests: KPI series, summary/fill rate, dashboard state and the KPI and dashboard endpoints
"""
import random

from django.test import SimpleTestCase
from rest_framework import status

from supplysight.core.test_utils import CatalogTestCase, TestDataFactory
from supplysight.catalog.models import Product
from supplysight.catalog.services import CatalogService
from supplysight.reports.dashboard import DashboardState
from supplysight.reports.kpis import KpiPoint, generate_kpis, kpi_days
from supplysight.reports.summary import chart_series, fill_rate, format_percent, summarize


class KpiTests(SimpleTestCase):
    """Test KPI range handling and series generation"""

    def test_range_tokens(self):
        self.assertEqual(kpi_days('7d'), 7)
        self.assertEqual(kpi_days('14d'), 14)
        self.assertEqual(kpi_days('30d'), 30)

    def test_unknown_range_defaults_to_seven_days(self):
        for token in ('90d', '', None, '14'):
            self.assertEqual(kpi_days(token), 7)

    def test_series_length_and_bounds(self):
        for token, days in (('7d', 7), ('14d', 14), ('30d', 30), ('bogus', 7)):
            points = generate_kpis(token)
            self.assertEqual(len(points), days)
            for point in points:
                self.assertTrue(100 <= point.stock <= 299)
                self.assertTrue(100 <= point.demand <= 299)

    def test_seeded_rng_is_reproducible(self):
        self.assertEqual(
            generate_kpis('14d', rng=random.Random(7)),
            generate_kpis('14d', rng=random.Random(7)),
        )


class SummaryTests(SimpleTestCase):
    """Test totals and fill rate"""

    def test_fill_rate(self):
        self.assertEqual(fill_rate(50, 80), 62.5)
        self.assertEqual(fill_rate(1, 3), 33.3)

    def test_fill_rate_is_capped(self):
        self.assertEqual(fill_rate(180, 120), 100.0)

    def test_fill_rate_with_zero_demand(self):
        self.assertEqual(fill_rate(0, 0), 0.0)
        self.assertEqual(fill_rate(500, 0), 0.0)
        self.assertEqual(format_percent(fill_rate(500, 0)), '0.0%')

    def test_summarize(self):
        points = [KpiPoint(stock=100, demand=150), KpiPoint(stock=120, demand=50)]
        self.assertEqual(summarize(points), {
            'total_stock': 220,
            'total_demand': 200,
            'fill_rate': 100.0,
            'fill_rate_display': '100.0%',
        })

    def test_summarize_empty(self):
        self.assertEqual(summarize([])['fill_rate_display'], '0.0%')

    def test_chart_series_labels(self):
        chart = chart_series([KpiPoint(1, 2), KpiPoint(3, 4)])
        self.assertEqual(chart, [
            {'day': 'Day 1', 'stock': 1, 'demand': 2},
            {'day': 'Day 2', 'stock': 3, 'demand': 4},
        ])


class DashboardStateTests(SimpleTestCase):
    """Test dashboard state, derived views and refetch after mutation"""

    def setUp(self):
        self.store = TestDataFactory.create_store()
        self.service = CatalogService(self.store)
        self.state = DashboardState(service=self.service, rng=random.Random(1))

    def test_initial_state(self):
        self.assertEqual(len(self.state.products), 4)
        self.assertEqual(len(self.state.kpis), 7)
        self.assertEqual(self.state.products_page()['page'], 1)
        self.assertEqual(len(self.state.chart()), 7)

    def test_filters_reset_page(self):
        self.state.set_page(3)
        self.state.set_search('nut')
        self.assertEqual(self.state.page, 1)
        self.assertEqual([p.id for p in self.state.products], ['P-1003'])

        self.state.set_page(2)
        self.state.set_warehouse('BLR-A')
        self.assertEqual(self.state.page, 1)

        self.state.set_page(2)
        self.state.set_status('Healthy')
        self.assertEqual(self.state.page, 1)

    def test_pagination_of_many_products(self):
        for n in range(21):
            TestDataFactory.create_product(store=self.store, id=f'P-{3000 + n}', sku=f'BULK-{n}')
        self.state.refresh_products()
        self.state.set_page(10)
        page = self.state.products_page()
        self.assertEqual(page['count'], 25)
        self.assertEqual(page['total_pages'], 3)
        self.assertEqual(page['page'], 3)
        self.assertEqual(len(page['results']), 5)

    def test_range_change_refetches_kpis(self):
        self.state.set_range('30d')
        self.assertEqual(len(self.state.kpis), 30)

    def test_summary_over_kpis(self):
        summary = self.state.summary()
        self.assertEqual(summary['total_stock'], sum(p.stock for p in self.state.kpis))
        self.assertEqual(summary['total_demand'], sum(p.demand for p in self.state.kpis))

    def test_summary_over_selected_product(self):
        self.state.select('P-1002')
        summary = self.state.summary()
        self.assertEqual(summary['total_stock'], 50)
        self.assertEqual(summary['total_demand'], 80)
        self.assertEqual(summary['fill_rate_display'], '62.5%')

    def test_transfer_targets(self):
        self.assertEqual(self.state.transfer_targets(), [])
        self.state.select('P-1001')
        self.assertEqual(self.state.warehouse_codes(), ['BLR-A', 'DEL-B', 'PNQ-C'])
        self.assertEqual(self.state.transfer_targets(), ['DEL-B', 'PNQ-C'])

    def test_update_demand_refetches(self):
        self.state.select('P-1001')
        product = self.state.update_demand(200)
        self.assertIsNone(self.state.error)
        self.assertEqual(product.demand, 200)
        self.assertEqual(self.state.selected.demand, 200)
        refreshed = {p.id: p for p in self.state.products}
        self.assertEqual(refreshed['P-1001'].demand, 200)

    def test_update_demand_error_is_recorded(self):
        self.state.select('P-1001')
        self.assertIsNone(self.state.update_demand(-5))
        self.assertEqual(self.state.error, 'Demand cannot be negative')
        self.assertEqual(self.state.selected.demand, 120)
        self.assertEqual(self.store.get_product('P-1001').demand, 120)

    def test_transfer_refetches_product_list(self):
        self.state.select('P-1004')
        product = self.state.transfer_stock('BLR-A', 10)
        self.assertEqual(product.stock, 14)
        self.assertEqual(self.state.selected.stock, 14)
        self.assertIn(Product('P-1005', 'Bearing 608ZZ', 'BRG-608-50', 'BLR-A', 10, 0), self.state.products)

    def test_transfer_errors(self):
        self.state.select('P-1004')
        self.assertIsNone(self.state.transfer_stock('', 1))
        self.assertEqual(self.state.error, 'Select a destination warehouse')

        self.assertIsNone(self.state.transfer_stock('BLR-A', 500))
        self.assertIn('Insufficient stock', self.state.error)
        self.assertEqual(len(self.state.products), 4)

    def test_mutation_without_selection(self):
        self.assertIsNone(self.state.update_demand(10))
        self.assertEqual(self.state.error, 'No product selected')


class ReportsAPITests(CatalogTestCase):
    """Test KPI and dashboard endpoints"""

    def test_kpis(self):
        for token, days in (('7d', 7), ('14d', 14), ('30d', 30), ('1y', 7)):
            response = self.client.get('/api/v1/kpis/', {'range': token})
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(len(response.data), days)
            self.assertEqual(set(response.data[0].keys()), {'stock', 'demand'})

    def test_kpis_default_range(self):
        response = self.client.get('/api/v1/kpis/')
        self.assertEqual(len(response.data), 7)

    def test_dashboard(self):
        response = self.client.get('/api/v1/dashboard/', {'range': '14d'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['range'], '14d')
        self.assertEqual(len(response.data['chart']), 14)
        self.assertEqual(response.data['products']['count'], 4)
        self.assertEqual(response.data['products']['page'], 1)
        self.assertEqual(len(response.data['warehouses']), 3)
        self.assertIsNone(response.data['selected'])
        self.assertEqual(response.data['transfer_targets'], [])

    def test_dashboard_with_selection_and_filters(self):
        response = self.client.get('/api/v1/dashboard/', {
            'warehouse': 'BLR-A', 'status': 'Critical', 'page': '7', 'selected': 'P-1002',
        })
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p['id'] for p in response.data['products']['results']], ['P-1002'])
        self.assertEqual(response.data['products']['page'], 1)
        self.assertEqual(response.data['summary']['total_stock'], 50)
        self.assertEqual(response.data['summary']['fill_rate_display'], '62.5%')
        self.assertEqual(response.data['selected']['status'], 'Critical')
        self.assertEqual(response.data['transfer_targets'], ['DEL-B', 'PNQ-C'])

    def test_dashboard_unknown_selection(self):
        response = self.client.get('/api/v1/dashboard/', {'selected': 'P-0001'})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
