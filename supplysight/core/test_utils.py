"""
Test utilities and factories for creating test data
"""
from django.core.cache import cache
from django.test import SimpleTestCase
from rest_framework.test import APIClient
import random
import string

from supplysight.catalog.models import Product, Warehouse
from supplysight.catalog.store import InMemoryCatalogStore, reset_store


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=6):
        """Generate a random string"""
        return ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))

    @staticmethod
    def create_warehouse(id=None, code=None, city='Mumbai', country='India'):
        """Create a warehouse record (not stored)"""
        code = code or f'WH-{TestDataFactory.random_string(3)}'
        return Warehouse(id=id or f'W-{code}', code=code, city=city, country=country)

    @staticmethod
    def create_product(store=None, id=None, name=None, sku=None, warehouse='BLR-A', stock=10, demand=5):
        """Create a product and add it to the store when one is given"""
        product = Product(
            id=id or f'P-{random.randint(5000, 9999)}',
            name=name or f'Product {TestDataFactory.random_string()}',
            sku=sku or f'SKU-{TestDataFactory.random_string()}',
            warehouse=warehouse,
            stock=stock,
            demand=demand,
        )
        if store is not None:
            store.add_product(product)
        return product

    @staticmethod
    def create_store(products=None, warehouses=None):
        """Seeded in-memory store, or one holding exactly the given records"""
        return InMemoryCatalogStore(products=products, warehouses=warehouses)


class CatalogTestCase(SimpleTestCase):
    """Every test starts from a freshly seeded process-wide store"""

    def setUp(self):
        cache.clear()
        self.store = reset_store(TestDataFactory.create_store())
        self.client = APIClient()

    def tearDown(self):
        reset_store()
        cache.clear()
