"""
Catalog storage.

CatalogStore is the interface every query and mutation goes through;
InMemoryCatalogStore is the default backend. The active backend is chosen by
settings.SUPPLYSIGHT_CATALOG_STORE and shared per process via get_store().

Stores hand out copies of their records. A caller changes a record by
saving it back, so a mutation that fails halfway never leaves a
half-updated product behind.
"""
from contextlib import contextmanager
import logging
import re
import threading

from django.conf import settings
from django.utils.module_loading import import_string

from supplysight.core.cache_utils import WAREHOUSE_LIST_KEY_PREFIX, invalidate
from . import seed
from .models import Product, Warehouse

logger = logging.getLogger(__name__)


class CatalogStore:
    """Interface for product and warehouse storage"""

    def list_products(self):
        """All products in insertion order"""
        raise NotImplementedError

    def get_product(self, product_id):
        """Product with the given id, or None"""
        raise NotImplementedError

    def find_product(self, sku, warehouse):
        """Product holding sku at the warehouse code, or None"""
        raise NotImplementedError

    def add_product(self, product):
        raise NotImplementedError

    def save_product(self, product):
        """Replace the stored record that has product.id"""
        raise NotImplementedError

    def next_product_id(self):
        """Allocate a fresh product id; never reused"""
        raise NotImplementedError

    def list_warehouses(self):
        raise NotImplementedError

    def get_warehouse(self, code):
        """Warehouse with the given code, or None"""
        raise NotImplementedError

    @contextmanager
    def atomic(self):
        """Serialize a read-check-write sequence against other writers"""
        yield


class InMemoryCatalogStore(CatalogStore):
    """Keeps products and warehouses in process memory; resets on restart"""

    def __init__(self, products=None, warehouses=None):
        if products is None:
            products = seed.PRODUCTS
        if warehouses is None:
            warehouses = seed.WAREHOUSES
        self._products = [Product(**p) if isinstance(p, dict) else p.copy() for p in products]
        self._warehouses = [Warehouse(**w) if isinstance(w, dict) else w for w in warehouses]
        self._next_id = self._first_free_id()
        self._lock = threading.RLock()

    def _first_free_id(self):
        numbers = []
        for product in self._products:
            match = re.fullmatch(rf'{re.escape(seed.PRODUCT_ID_PREFIX)}(\d+)', product.id)
            if match:
                numbers.append(int(match.group(1)))
        return max(numbers) + 1 if numbers else 1001

    def _index_of(self, product_id):
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def list_products(self):
        return [p.copy() for p in self._products]

    def get_product(self, product_id):
        index = self._index_of(product_id)
        return self._products[index].copy() if index is not None else None

    def find_product(self, sku, warehouse):
        for product in self._products:
            if product.sku == sku and product.warehouse == warehouse:
                return product.copy()
        return None

    def add_product(self, product):
        if self._index_of(product.id) is not None:
            raise ValueError(f"Product {product.id} already exists")
        self._products.append(product.copy())
        logger.debug(f"Added product {product.id} ({product.sku} @ {product.warehouse})")
        return product

    def save_product(self, product):
        index = self._index_of(product.id)
        if index is None:
            raise KeyError(product.id)
        self._products[index] = product.copy()
        return product

    def next_product_id(self):
        with self._lock:
            product_id = f"{seed.PRODUCT_ID_PREFIX}{self._next_id}"
            self._next_id += 1
        return product_id

    def list_warehouses(self):
        return list(self._warehouses)

    def get_warehouse(self, code):
        for warehouse in self._warehouses:
            if warehouse.code == code:
                return warehouse
        return None

    @contextmanager
    def atomic(self):
        with self._lock:
            yield


_store = None
_store_lock = threading.Lock()


def get_store():
    """Process-wide store instance, built from settings on first use"""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                store_class = import_string(settings.SUPPLYSIGHT_CATALOG_STORE)
                _store = store_class()
                logger.info(f"Catalog store initialised: {settings.SUPPLYSIGHT_CATALOG_STORE}")
    return _store


def reset_store(store=None):
    """Replace the process-wide store (a fresh seeded one by default)"""
    global _store
    with _store_lock:
        if store is None:
            store = import_string(settings.SUPPLYSIGHT_CATALOG_STORE)()
        _store = store
    invalidate(WAREHOUSE_LIST_KEY_PREFIX)
    logger.info("Catalog store reset")
    return _store
