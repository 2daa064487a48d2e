"""
Test suite for the Catalog module
Tests: status derivation, product filtering, demand updates, stock transfers and the product API
"""
from django.test import SimpleTestCase
from rest_framework import status

from supplysight.core.exceptions import InsufficientStock, InvalidInput, NotFound
from supplysight.core.test_utils import CatalogTestCase, TestDataFactory
from supplysight.catalog.filters import filter_products
from supplysight.catalog.models import StockStatus, derive_status
from supplysight.catalog.services import CatalogService
from supplysight.catalog.store import InMemoryCatalogStore


def sku_total(store, sku):
    return sum(p.stock for p in store.list_products() if p.sku == sku)


class StockStatusTests(SimpleTestCase):
    """Test derived product status"""

    def test_healthy_when_stock_exceeds_demand(self):
        self.assertEqual(derive_status(180, 120), StockStatus.HEALTHY)

    def test_low_when_stock_equals_demand(self):
        self.assertEqual(derive_status(80, 80), StockStatus.LOW)
        self.assertEqual(derive_status(0, 0), StockStatus.LOW)

    def test_critical_when_stock_below_demand(self):
        self.assertEqual(derive_status(24, 120), StockStatus.CRITICAL)

    def test_invalid_when_negative(self):
        self.assertEqual(derive_status(-1, 5), StockStatus.INVALID)
        self.assertEqual(derive_status(5, -1), StockStatus.INVALID)
        self.assertEqual(derive_status(-5, -5), StockStatus.INVALID)

    def test_seed_statuses(self):
        """Test the seeded products cover every non-invalid status"""
        store = InMemoryCatalogStore()
        statuses = {p.id: p.status for p in store.list_products()}
        self.assertEqual(statuses, {
            'P-1001': StockStatus.HEALTHY,
            'P-1002': StockStatus.CRITICAL,
            'P-1003': StockStatus.LOW,
            'P-1004': StockStatus.CRITICAL,
        })


class FilterProductsTests(SimpleTestCase):
    """Test product list filtering"""

    def setUp(self):
        self.products = InMemoryCatalogStore().list_products()

    def ids(self, products):
        return [p.id for p in products]

    def test_no_filters_returns_everything_in_order(self):
        self.assertEqual(self.ids(filter_products(self.products)), ['P-1001', 'P-1002', 'P-1003', 'P-1004'])

    def test_search_is_case_insensitive_on_name(self):
        result = filter_products(self.products, search='hex')
        self.assertEqual(self.ids(result), ['P-1001'])
        for p in result:
            self.assertTrue(
                'hex' in p.name.lower() or 'hex' in p.sku.lower() or 'hex' in p.id.lower()
            )

    def test_search_matches_sku_and_id(self):
        self.assertEqual(self.ids(filter_products(self.products, search='wsr-08')), ['P-1002'])
        self.assertEqual(self.ids(filter_products(self.products, search='p-1003')), ['P-1003'])

    def test_search_without_match(self):
        self.assertEqual(filter_products(self.products, search='gearbox'), [])

    def test_warehouse_filter(self):
        result = filter_products(self.products, warehouse='BLR-A')
        self.assertEqual(self.ids(result), ['P-1001', 'P-1002'])
        self.assertTrue(all(p.warehouse == 'BLR-A' for p in result))

    def test_all_sentinel_disables_filters(self):
        self.assertEqual(len(filter_products(self.products, warehouse='All', status='All')), 4)
        self.assertEqual(len(filter_products(self.products, warehouse='', status=None)), 4)

    def test_status_filter(self):
        self.assertEqual(self.ids(filter_products(self.products, status='Healthy')), ['P-1001'])
        self.assertEqual(self.ids(filter_products(self.products, status='Low')), ['P-1003'])
        self.assertEqual(self.ids(filter_products(self.products, status='Critical')), ['P-1002', 'P-1004'])

    def test_invalid_status_is_not_selectable(self):
        products = self.products + [TestDataFactory.create_product(id='P-9000', stock=-3, demand=4)]
        self.assertEqual(filter_products(products, status='Invalid'), [])
        self.assertEqual(filter_products(products, status='Unknown'), [])
        self.assertNotIn('P-9000', self.ids(filter_products(products, status='Critical')))

    def test_filters_combine(self):
        result = filter_products(self.products, search='steel', warehouse='BLR-A', status='Critical')
        self.assertEqual(self.ids(result), ['P-1002'])
        self.assertEqual(filter_products(self.products, search='steel', warehouse='PNQ-C'), [])

    def test_filtering_does_not_mutate_input(self):
        before = [p.copy() for p in self.products]
        filter_products(self.products, search='nut', status='Low', warehouse='PNQ-C')
        self.assertEqual(self.products, before)


class UpdateDemandTests(SimpleTestCase):
    """Test the demand update mutation"""

    def setUp(self):
        self.store = TestDataFactory.create_store()
        self.service = CatalogService(self.store)

    def test_update_demand_changes_status(self):
        product = self.service.get_product('P-1001')
        self.assertEqual(product.status, StockStatus.HEALTHY)

        updated = self.service.update_demand('P-1001', 200)
        self.assertEqual(updated.stock, 180)
        self.assertEqual(updated.demand, 200)
        self.assertEqual(updated.status, StockStatus.CRITICAL)
        self.assertEqual(self.store.get_product('P-1001').demand, 200)

    def test_update_demand_to_zero(self):
        self.assertEqual(self.service.update_demand('P-1003', 0).demand, 0)

    def test_unknown_product(self):
        before = self.store.list_products()
        with self.assertRaises(NotFound):
            self.service.update_demand('P-9999', 10)
        self.assertEqual(self.store.list_products(), before)

    def test_negative_demand_rejected(self):
        with self.assertRaises(InvalidInput):
            self.service.update_demand('P-1001', -1)
        self.assertEqual(self.store.get_product('P-1001').demand, 120)

    def test_non_integer_demand_rejected(self):
        with self.assertRaises(InvalidInput):
            self.service.update_demand('P-1001', '12')
        with self.assertRaises(InvalidInput):
            self.service.update_demand('P-1001', True)


class TransferStockTests(SimpleTestCase):
    """Test the stock transfer mutation"""

    def setUp(self):
        self.store = TestDataFactory.create_store()
        self.service = CatalogService(self.store)

    def test_transfer_creates_destination_record(self):
        total_before = sku_total(self.store, 'BRG-608-50')

        source = self.service.transfer_stock('P-1004', 'DEL-B', 'BLR-A', 10)

        self.assertEqual(source.id, 'P-1004')
        self.assertEqual(source.stock, 14)
        self.assertEqual(source.demand, 120)
        created = self.store.find_product('BRG-608-50', 'BLR-A')
        self.assertIsNotNone(created)
        self.assertEqual(created.id, 'P-1005')
        self.assertEqual(created.name, 'Bearing 608ZZ')
        self.assertEqual(created.stock, 10)
        self.assertEqual(created.demand, 0)
        self.assertEqual(sku_total(self.store, 'BRG-608-50'), total_before)

    def test_transfer_into_existing_record(self):
        self.service.transfer_stock('P-1004', 'DEL-B', 'BLR-A', 10)
        self.service.transfer_stock('P-1004', 'DEL-B', 'BLR-A', 4)

        self.assertEqual(self.store.get_product('P-1004').stock, 10)
        self.assertEqual(self.store.get_product('P-1005').stock, 14)
        self.assertEqual(len(self.store.list_products()), 5)

    def test_transfer_back_reuses_original_record(self):
        self.service.transfer_stock('P-1004', 'DEL-B', 'BLR-A', 10)
        self.service.transfer_stock('P-1005', 'BLR-A', 'DEL-B', 6)

        self.assertEqual(self.store.get_product('P-1004').stock, 20)
        self.assertEqual(self.store.get_product('P-1005').stock, 4)
        self.assertEqual(sku_total(self.store, 'BRG-608-50'), 24)

    def test_transfer_entire_stock(self):
        source = self.service.transfer_stock('P-1003', 'PNQ-C', 'DEL-B', 80)
        self.assertEqual(source.stock, 0)
        self.assertEqual(self.store.find_product('NUT-08-200', 'DEL-B').stock, 80)

    def test_new_ids_are_never_reused(self):
        self.service.transfer_stock('P-1001', 'BLR-A', 'PNQ-C', 1)
        self.service.transfer_stock('P-1001', 'BLR-A', 'DEL-B', 1)
        ids = [p.id for p in self.store.list_products()]
        self.assertEqual(ids[-2:], ['P-1005', 'P-1006'])
        self.assertEqual(len(ids), len(set(ids)))

    def test_insufficient_stock_changes_nothing(self):
        before = self.store.list_products()
        with self.assertRaises(InsufficientStock):
            self.service.transfer_stock('P-1004', 'DEL-B', 'BLR-A', 25)
        self.assertEqual(self.store.list_products(), before)

    def test_wrong_source_warehouse(self):
        before = self.store.list_products()
        with self.assertRaises(NotFound):
            self.service.transfer_stock('P-1004', 'BLR-A', 'PNQ-C', 1)
        self.assertEqual(self.store.list_products(), before)

    def test_unknown_product(self):
        with self.assertRaises(NotFound):
            self.service.transfer_stock('P-4040', 'DEL-B', 'BLR-A', 1)

    def test_non_positive_quantity(self):
        before = self.store.list_products()
        for qty in (0, -5):
            with self.assertRaises(InvalidInput):
                self.service.transfer_stock('P-1004', 'DEL-B', 'BLR-A', qty)
        self.assertEqual(self.store.list_products(), before)

    def test_unknown_or_same_destination(self):
        with self.assertRaises(InvalidInput):
            self.service.transfer_stock('P-1004', 'DEL-B', 'XYZ-9', 1)
        with self.assertRaises(InvalidInput):
            self.service.transfer_stock('P-1004', 'DEL-B', 'DEL-B', 1)
        self.assertEqual(self.store.get_product('P-1004').stock, 24)


class InMemoryCatalogStoreTests(SimpleTestCase):
    """Test the in-memory store"""

    def test_returns_copies(self):
        store = TestDataFactory.create_store()
        product = store.get_product('P-1001')
        product.stock = 0
        self.assertEqual(store.get_product('P-1001').stock, 180)

    def test_id_allocation_follows_highest_seed_id(self):
        store = TestDataFactory.create_store(products=[
            TestDataFactory.create_product(id='P-2040'),
            TestDataFactory.create_product(id='legacy-7'),
        ])
        self.assertEqual(store.next_product_id(), 'P-2041')
        self.assertEqual(store.next_product_id(), 'P-2042')

    def test_duplicate_id_rejected(self):
        store = TestDataFactory.create_store()
        with self.assertRaises(ValueError):
            TestDataFactory.create_product(store=store, id='P-1001')

    def test_warehouse_lookup(self):
        store = TestDataFactory.create_store()
        self.assertEqual(store.get_warehouse('PNQ-C').city, 'Pune')
        self.assertIsNone(store.get_warehouse('NOPE'))


class ProductAPITests(CatalogTestCase):
    """Test product API endpoints"""

    def test_list_products(self):
        response = self.client.get('/api/v1/products/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p['id'] for p in response.data], ['P-1001', 'P-1002', 'P-1003', 'P-1004'])
        self.assertEqual(response.data[0]['status'], 'Healthy')
        self.assertEqual(
            set(response.data[0].keys()),
            {'id', 'name', 'sku', 'warehouse', 'stock', 'demand', 'status'},
        )

    def test_list_products_with_filters(self):
        response = self.client.get('/api/v1/products/', {'search': 'HEX'})
        self.assertEqual([p['id'] for p in response.data], ['P-1001'])

        response = self.client.get('/api/v1/products/', {'warehouse': 'BLR-A', 'status': 'Critical'})
        self.assertEqual([p['id'] for p in response.data], ['P-1002'])

        response = self.client.get('/api/v1/products/', {'warehouse': 'All', 'status': 'All'})
        self.assertEqual(len(response.data), 4)

    def test_product_detail(self):
        response = self.client.get('/api/v1/products/P-1003/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'Low')

    def test_product_detail_not_found(self):
        response = self.client.get('/api/v1/products/P-0000/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['code'], 'not_found')

    def test_update_demand(self):
        response = self.client.post('/api/v1/products/P-1001/demand/', {'demand': 200}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['demand'], 200)
        self.assertEqual(response.data['status'], 'Critical')

        # A fresh read reflects the mutation
        response = self.client.get('/api/v1/products/P-1001/')
        self.assertEqual(response.data['demand'], 200)

    def test_update_demand_errors(self):
        response = self.client.post('/api/v1/products/P-9999/demand/', {'demand': 5}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'Product P-9999 not found')

        response = self.client.post('/api/v1/products/P-1001/demand/', {'demand': -2}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'invalid_input')

        response = self.client.post('/api/v1/products/P-1001/demand/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('demand', response.data)

        self.assertEqual(self.store.get_product('P-1001').demand, 120)

    def test_transfer_stock(self):
        data = {'from': 'DEL-B', 'to': 'BLR-A', 'qty': 10}
        response = self.client.post('/api/v1/products/P-1004/transfer/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['id'], 'P-1004')
        self.assertEqual(response.data['stock'], 14)

        response = self.client.get('/api/v1/products/', {'warehouse': 'BLR-A', 'search': 'bearing'})
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['stock'], 10)
        self.assertEqual(response.data[0]['demand'], 0)

    def test_transfer_stock_insufficient(self):
        data = {'from': 'DEL-B', 'to': 'BLR-A', 'qty': 100}
        response = self.client.post('/api/v1/products/P-1004/transfer/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['code'], 'insufficient_stock')
        self.assertEqual(self.store.get_product('P-1004').stock, 24)
        self.assertEqual(len(self.store.list_products()), 4)

    def test_transfer_stock_missing_fields(self):
        response = self.client.post('/api/v1/products/P-1004/transfer/', {'to': 'BLR-A', 'qty': 1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('from', response.data)
