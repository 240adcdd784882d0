"""checkout功能测试数据"""
from data.factory import ProductId

FINISH_PAGE_MESSAGE = "Thank you for your order!"
FINISH_PAGE_TEXT = "Your order has been dispatched"
PAYMENT_INFO = "SauceCard"
SHIPPING_INFO = "Free Pony Express Delivery"

CHECKOUT_INFO_TITLE = "Checkout: Your Information"
CHECKOUT_OVERVIEW_TITLE = "Checkout: Overview"
CHECKOUT_COMPLETE_TITLE = "Checkout: Complete!"

# $29.99 + $7.99
TOTAL_CALC_PRODUCTS = [ProductId.BACKPACK, ProductId.ONESIE]
TOTAL_CALC_SUBTOTAL = "$37.98"

# $29.99 + $9.99 + $15.99
MULTIPLE_PRODUCTS = [ProductId.BACKPACK, ProductId.BIKE_LIGHT, ProductId.BOLT_TSHIRT]
MULTIPLE_SUBTOTAL = "$55.97"
