import re
from collections import Counter
from decimal import Decimal

from assertions.base_assert import check


class InventoryAssert:

    @staticmethod
    def product_count(actual_count: int, expect_count: int):
        check(actual_count == expect_count, f"期望商品数量：{expect_count}，实际商品数量：{actual_count}")

    @staticmethod
    def column_not_empty(names: list):
        check(names, "商品信息list为空")
        for name in names:
            check(name and name.strip(), f"存在商品信息为空：{names}")

    @staticmethod
    def product_price_format(prices: list[str]):
        check(prices, "商品价格list为空")
        for price in prices:
            check(re.match(r"^\$\d+(\.\d{2})$", price), f"商品价格格式错误：{price}")

    @staticmethod
    def product_price_is_decimal(prices: list[Decimal]):
        for price in prices:
            check(isinstance(price, Decimal), f"价格不是 Decimal: {price}")
            check(price > 0, f"价格必须大于 0: {price}")

    @staticmethod
    def sort_asc(values: list):
        check(values == sorted(values), f"未正序排列：{values}")

    @staticmethod
    def sort_desc(values: list):
        check(values == sorted(values, reverse=True), f"未倒序排列：{values}")

    @staticmethod
    def same_items(before: list, after: list):
        """排序只改变顺序：排序前后商品多重集合一致"""
        missing = Counter(before) - Counter(after)
        extra = Counter(after) - Counter(before)
        check(not missing and not extra,
              f"排序后商品集合发生变化：缺少{list(missing.elements())}，多出{list(extra.elements())}")

    @staticmethod
    def first_item(values: list, expect: str):
        check(values, "商品列表为空")
        check(values[0] == expect, f"期望第一个商品：{expect}，实际：{values[0]}")

    @staticmethod
    def option_equal(actual: str, expect: str):
        check(actual == expect, f"期望排序方式：{expect}，实际排序方式：{actual}")

    @staticmethod
    def all_contain(values: list, keyword: str):
        check(values, "列表为空")
        for value in values:
            check(value and keyword in value, f"{value} 中不包含 {keyword}")
