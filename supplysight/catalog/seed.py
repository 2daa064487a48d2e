"""Reference data loaded into the catalog store at process start"""

WAREHOUSES = [
    {'id': 'W1', 'code': 'BLR-A', 'city': 'Bangalore', 'country': 'India'},
    {'id': 'W2', 'code': 'PNQ-C', 'city': 'Pune', 'country': 'India'},
    {'id': 'W3', 'code': 'DEL-B', 'city': 'Delhi', 'country': 'India'},
]

PRODUCTS = [
    {'id': 'P-1001', 'name': '12mm Hex Bolt', 'sku': 'HEX-12-100', 'warehouse': 'BLR-A', 'stock': 180, 'demand': 120},
    {'id': 'P-1002', 'name': 'Steel Washer', 'sku': 'WSR-08-500', 'warehouse': 'BLR-A', 'stock': 50, 'demand': 80},
    {'id': 'P-1003', 'name': 'M8 Nut', 'sku': 'NUT-08-200', 'warehouse': 'PNQ-C', 'stock': 80, 'demand': 80},
    {'id': 'P-1004', 'name': 'Bearing 608ZZ', 'sku': 'BRG-608-50', 'warehouse': 'DEL-B', 'stock': 24, 'demand': 120},
]

PRODUCT_ID_PREFIX = 'P-'
