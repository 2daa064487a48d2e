"""
Catalog data types.

These are plain dataclasses rather than Django models: the catalog lives in
process memory behind a CatalogStore (see store.py) and nothing is persisted.
"""
from dataclasses import dataclass, replace
from enum import Enum


class StockStatus(str, Enum):
    """Health of a product record, derived from stock vs demand on every read"""
    HEALTHY = 'Healthy'
    LOW = 'Low'
    CRITICAL = 'Critical'
    INVALID = 'Invalid'


# Values accepted by the status filter; Invalid is never selectable
FILTERABLE_STATUSES = (StockStatus.HEALTHY, StockStatus.LOW, StockStatus.CRITICAL)

# Filter value meaning "no filter" for warehouse and status
ALL = 'All'


def derive_status(stock, demand) -> StockStatus:
    """Classify a stock/demand pair"""
    if stock < 0 or demand < 0:
        return StockStatus.INVALID
    if stock > demand:
        return StockStatus.HEALTHY
    if stock == demand:
        return StockStatus.LOW
    return StockStatus.CRITICAL


@dataclass
class Warehouse:
    """Static reference warehouse; products point at it by code"""
    id: str
    code: str
    city: str
    country: str


@dataclass
class Product:
    """Stock of one sku held at one warehouse"""
    id: str
    name: str
    sku: str
    warehouse: str
    stock: int = 0
    demand: int = 0

    @property
    def status(self) -> StockStatus:
        return derive_status(self.stock, self.demand)

    def copy(self):
        return replace(self)
