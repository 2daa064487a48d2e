from django.urls import path
from .views import warehouse_list, warehouse_detail

urlpatterns = [
    path('warehouses/', warehouse_list, name='warehouse-list'),
    path('warehouses/<str:code>/', warehouse_detail, name='warehouse-detail'),
]
