from django.urls import path
from .views import kpi_list, dashboard

urlpatterns = [
    path('kpis/', kpi_list, name='kpi-list'),
    path('dashboard/', dashboard, name='dashboard'),
]
