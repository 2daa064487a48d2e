"""
Catalog queries and mutations.

Every mutation validates its input here, at the mutation boundary, and
raises a SupplySightError subclass before touching the store. A call either
applies completely or leaves every record unchanged.
"""
import logging

from supplysight.core.exceptions import InsufficientStock, InvalidInput, NotFound
from .filters import filter_products
from .models import Product
from .store import get_store

logger = logging.getLogger('supplysight.catalog')


def _require_int(value, field):
    # bool is an int subclass but never a valid quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{field} must be an integer")
    return value


class CatalogService:
    """Query/mutation surface over a CatalogStore"""

    def __init__(self, store=None):
        self.store = store if store is not None else get_store()

    # Queries

    def list_products(self, search=None, status=None, warehouse=None):
        products = filter_products(self.store.list_products(), search=search, status=status, warehouse=warehouse)
        logger.debug(f"products(search={search!r}, status={status!r}, warehouse={warehouse!r}) -> {len(products)}")
        return products

    def get_product(self, product_id):
        product = self.store.get_product(product_id)
        if product is None:
            raise NotFound(f"Product {product_id} not found")
        return product

    def list_warehouses(self):
        return self.store.list_warehouses()

    def get_warehouse(self, code):
        warehouse = self.store.get_warehouse(code)
        if warehouse is None:
            raise NotFound(f"Warehouse {code} not found")
        return warehouse

    # Mutations

    def update_demand(self, product_id, demand):
        """Set a product's demand. Returns the updated product."""
        _require_int(demand, 'Demand')
        if demand < 0:
            raise InvalidInput('Demand cannot be negative')

        with self.store.atomic():
            product = self.get_product(product_id)
            previous = product.demand
            product.demand = demand
            self.store.save_product(product)

        logger.info(f"Demand for {product_id} updated: {previous} -> {demand}")
        return product

    def transfer_stock(self, product_id, from_warehouse, to_warehouse, qty):
        """
        Move qty units of a product's sku from one warehouse to another.

        The destination record is the product with the same sku at
        to_warehouse; one is created (demand 0) if none exists.

        Returns:
            the updated source product
        """
        _require_int(qty, 'Quantity')
        if qty <= 0:
            raise InvalidInput('Quantity must be greater than zero')
        if to_warehouse == from_warehouse:
            raise InvalidInput('Source and destination warehouse must differ')
        if self.store.get_warehouse(to_warehouse) is None:
            raise InvalidInput(f"Unknown destination warehouse {to_warehouse}")

        with self.store.atomic():
            source = self.store.get_product(product_id)
            if source is None or source.warehouse != from_warehouse:
                raise NotFound(f"Product {product_id} not found in warehouse {from_warehouse}")
            if source.stock < qty:
                raise InsufficientStock(
                    f"Insufficient stock: {source.stock} available, {qty} requested"
                )

            destination = self.store.find_product(source.sku, to_warehouse)
            source.stock -= qty
            self.store.save_product(source)

            if destination is None:
                destination = Product(
                    id=self.store.next_product_id(),
                    name=source.name,
                    sku=source.sku,
                    warehouse=to_warehouse,
                    stock=qty,
                    demand=0,
                )
                self.store.add_product(destination)
                logger.info(f"Created {destination.id} for {source.sku} at {to_warehouse}")
            else:
                destination.stock += qty
                self.store.save_product(destination)

        logger.info(
            f"Transferred {qty} x {source.sku} from {from_warehouse} ({source.id}) "
            f"to {to_warehouse} ({destination.id})"
        )
        return source
