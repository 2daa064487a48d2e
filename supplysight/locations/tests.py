"""
Test suite for Locations module
Tests: warehouse list (with caching) and warehouse detail
"""
from rest_framework import status

from supplysight.core.test_utils import CatalogTestCase, TestDataFactory
from supplysight.catalog.store import reset_store


class WarehouseAPITests(CatalogTestCase):
    """Test warehouse endpoints"""

    def test_list_warehouses(self):
        response = self.client.get('/api/v1/warehouses/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [
            {'id': 'W1', 'code': 'BLR-A', 'city': 'Bangalore', 'country': 'India'},
            {'id': 'W2', 'code': 'PNQ-C', 'city': 'Pune', 'country': 'India'},
            {'id': 'W3', 'code': 'DEL-B', 'city': 'Delhi', 'country': 'India'},
        ])

    def test_list_warehouses_is_cached(self):
        first = self.client.get('/api/v1/warehouses/')
        second = self.client.get('/api/v1/warehouses/')
        self.assertEqual(first['X-Cache'], 'MISS')
        self.assertEqual(second['X-Cache'], 'HIT')
        self.assertEqual(first.data, second.data)

    def test_store_reset_invalidates_cache(self):
        self.client.get('/api/v1/warehouses/')
        reset_store(TestDataFactory.create_store(
            warehouses=[TestDataFactory.create_warehouse(id='W9', code='BOM-Z')]
        ))
        response = self.client.get('/api/v1/warehouses/')
        self.assertEqual(response['X-Cache'], 'MISS')
        self.assertEqual([w['code'] for w in response.data], ['BOM-Z'])

    def test_warehouse_detail(self):
        response = self.client.get('/api/v1/warehouses/DEL-B/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['city'], 'Delhi')

    def test_warehouse_detail_not_found(self):
        response = self.client.get('/api/v1/warehouses/NOPE/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'Warehouse NOPE not found')
