"""cart功能测试数据"""
from data.factory import ProductId

SINGLE_PRODUCT = [ProductId.BACKPACK]
THREE_PRODUCTS = [ProductId.BACKPACK, ProductId.BIKE_LIGHT, ProductId.BOLT_TSHIRT]
ALL_PRODUCTS = list(ProductId)

ADD_PRODUCTS = [ProductId.BACKPACK, ProductId.BIKE_LIGHT]
REMOVE_PRODUCTS = [ProductId.BACKPACK]
