from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    sku = serializers.CharField(read_only=True)
    warehouse = serializers.CharField(read_only=True)
    stock = serializers.IntegerField(read_only=True)
    demand = serializers.IntegerField(read_only=True)
    status = serializers.SerializerMethodField()

    def get_status(self, obj):
        return obj.status.value


class ProductFilterSerializer(serializers.Serializer):
    """Query parameters of the product list"""
    search = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    status = serializers.CharField(required=False, allow_blank=True)
    warehouse = serializers.CharField(required=False, allow_blank=True)


class UpdateDemandSerializer(serializers.Serializer):
    # Sign is checked by CatalogService.update_demand
    demand = serializers.IntegerField()


class TransferStockSerializer(serializers.Serializer):
    """Body of a transfer: {"from": code, "to": code, "qty": int}"""
    to = serializers.CharField()
    qty = serializers.IntegerField()

    def get_fields(self):
        fields = super().get_fields()
        # 'from' is a keyword, so it cannot be declared as a class attribute
        fields['from'] = serializers.CharField(source='from_warehouse')
        return fields
