"""inventory功能测试数据"""
from enum import Enum


class SortOrder(Enum):
    """排序下拉框 option value 与展示文案"""
    NAME_AZ = ("az", "Name (A to Z)")
    NAME_ZA = ("za", "Name (Z to A)")
    PRICE_LOW_HIGH = ("lohi", "Price (low to high)")
    PRICE_HIGH_LOW = ("hilo", "Price (high to low)")

    def __init__(self, key: str, label: str):
        self.key = key
        self.label = label


PRODUCT_COUNT = 6

PRODUCTS_TITLE = "Products"

# 各排序方式下第一个商品
FIRST_NAME_AZ = "Sauce Labs Backpack"
FIRST_NAME_ZA = "Test.allTheThings() T-Shirt (Red)"
LOWEST_PRICE = "$7.99"
HIGHEST_PRICE = "$49.99"

FOOTER_LINKS = {
    "Twitter": "https://twitter.com/saucelabs",
    "Facebook": "https://www.facebook.com/saucelabs",
    "LinkedIn": "https://www.linkedin.com/company/sauce-labs/",
}
