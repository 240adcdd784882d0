"""金额解析与订单价格计算"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
import re

from config.pages import TAX_RATE
from utils.errors import AssertionMismatch

CENT = Decimal("0.01")


def parse_money(text: str) -> Decimal:
    """
        从 'Item total: $39.98' 提取 Decimal('39.98')
        """
    match = re.search(r"\$(\d+(?:\.\d+)?)", text)
    if not match:
        raise AssertionMismatch(f"无法从文本中解析金额：{text}")
    return Decimal(match.group(1))


def format_money(amount: Decimal) -> str:
    """Decimal('37.98') -> '$37.98'"""
    return f"${amount.quantize(CENT, rounding=ROUND_HALF_UP)}"


@dataclass(frozen=True)
class OrderSummary:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def calc_order_summary(prices, tax_rate: Decimal = TAX_RATE) -> OrderSummary:
    """按站点规则重新计算订单金额：
    subtotal = 各商品单价之和
    tax = round(subtotal * tax_rate, 2)
    total = subtotal + tax
    prices 可以是 Decimal，也可以是 '$29.99' 这样的价格字符串
    """
    # 显式指定 sum 初始值="0"
    subtotal = sum((p if isinstance(p, Decimal) else parse_money(p) for p in prices), Decimal("0"))
    tax = (subtotal * tax_rate).quantize(CENT, rounding=ROUND_HALF_UP)
    return OrderSummary(subtotal=subtotal, tax=tax, total=subtotal + tax)
