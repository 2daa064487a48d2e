from django.urls import path
from .views import (
    product_list, product_detail,
    product_update_demand, product_transfer_stock
)

urlpatterns = [
    path('products/', product_list, name='product-list'),
    path('products/<str:pk>/', product_detail, name='product-detail'),
    path('products/<str:pk>/demand/', product_update_demand, name='product-update-demand'),
    path('products/<str:pk>/transfer/', product_transfer_stock, name='product-transfer-stock'),
]
