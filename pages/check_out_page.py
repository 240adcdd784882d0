from decimal import Decimal

from playwright.sync_api import Page

from assertions.check_out_assert import CheckOutAssert
from config.locators import CHECKOUT_LOCATORS
from config.pages import URLS, ENV
from data.checkout_data import CHECKOUT_INFO_TITLE, CHECKOUT_OVERVIEW_TITLE, CHECKOUT_COMPLETE_TITLE
from data.factory import CheckoutInfo
from pages.base_page import StorePage
from pages.screens import Screen, route_pattern
from utils.common_utils import parse_money, format_money, calc_order_summary


class CheckOutPage(StorePage):
    """checkout-step-one 收货人信息"""
    screen = Screen.CHECKOUT_INFO

    def __init__(self, page: Page):
        super().__init__(page)
        self.firstName_input = page.get_by_test_id(CHECKOUT_LOCATORS["firstName_input"])  # firstName输入框
        self.lastName_input = page.get_by_test_id(CHECKOUT_LOCATORS["lastName_input"])  # lastName输入框
        self.postalCode_input = page.get_by_test_id(CHECKOUT_LOCATORS["postalCode_input"])  # postalCode输入框
        self.container_error_msg = page.get_by_test_id(CHECKOUT_LOCATORS["container_error_msg"])  # 必填校验错误提示
        self.cancel_button = page.get_by_test_id(CHECKOUT_LOCATORS["step_one_cancel_button"])  # 取消按钮
        self.continue_button = page.get_by_test_id(CHECKOUT_LOCATORS["continue_button"])  # 继续按钮

    # ========== 页面行为 ==========
    def navigate(self):
        self.open(URLS[ENV]["checkout_step_one"])
        self.wait_visible(self.firstName_input)

    def fill_first_name(self, first_name: str):
        self.fill(self.firstName_input, first_name)

    def fill_last_name(self, last_name: str):
        self.fill(self.lastName_input, last_name)

    def fill_postal_code(self, postal_code: str):
        self.fill(self.postalCode_input, postal_code)

    def fill_checkout_info(self, info: CheckoutInfo):
        self.fill_first_name(info.first_name)
        self.fill_last_name(info.last_name)
        self.fill_postal_code(info.postal_code)

    def continue_checkout(self):
        """点击continue按钮；是否跳转由调用方校验（缺字段时停留在本页）"""
        self.click(self.continue_button)

    def cancel(self):
        """取消后回到购物车"""
        self.click(self.cancel_button)
        self.wait_screen(Screen.CART)

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.text(self.container_error_msg)

    def is_error_message_visible(self) -> bool:
        return self.is_visible(self.container_error_msg)

    # ========== 基本验证 ==========
    def verify_checkout_title(self):
        self.verify_title(CHECKOUT_INFO_TITLE)

    def verify_error_message(self, expect_error_msg: str):
        self.expect_visible(self.container_error_msg, "收货人信息校验错误提示应显示")
        CheckOutAssert.tips_message(self.get_error_message(), expect_error_msg)
        self.verify_on_screen()

    def verify_navigation_to_overview(self):
        self.expect_url(route_pattern(Screen.CHECKOUT_OVERVIEW), "填写完整收货人信息后应进入订单确认页")
        self.verify_title(CHECKOUT_OVERVIEW_TITLE)


class CheckOutOverviewPage(StorePage):
    """checkout-step-two 订单确认"""
    screen = Screen.CHECKOUT_OVERVIEW

    def __init__(self, page: Page):
        super().__init__(page)
        # 商品信息
        self.item_product = page.get_by_test_id(CHECKOUT_LOCATORS["item_list"])
        # 订单价格
        self.payment_information = page.get_by_test_id(CHECKOUT_LOCATORS["payment_information"])  # 支付信息value
        self.shipping_information = page.get_by_test_id(CHECKOUT_LOCATORS["shipping_information"])  # 运费信息value
        self.item_total = page.get_by_test_id(CHECKOUT_LOCATORS["products_price"])  # 商品总价格
        self.tax = page.get_by_test_id(CHECKOUT_LOCATORS["tax_price"])  # 税费
        self.total = page.get_by_test_id(CHECKOUT_LOCATORS["order_price"])  # 订单价格
        # 操作步骤
        self.cancel_button = page.get_by_test_id(CHECKOUT_LOCATORS["step_two_cancel_button"])  # 取消按钮
        self.finish_button = page.get_by_test_id(CHECKOUT_LOCATORS["finish_button"])  # 完成按钮

    # ========== 页面行为 ==========
    def navigate(self):
        self.open(URLS[ENV]["checkout_step_two"])
        self.wait_visible(self.finish_button)

    def finish(self):
        self.click(self.finish_button)
        self.wait_screen(Screen.CHECKOUT_COMPLETE)

    def cancel(self):
        self.click(self.cancel_button)
        self.wait_screen(Screen.INVENTORY)

    # ================= 数据获取 =================
    def get_order_products(self) -> list[dict]:
        products = []
        for i in range(self.item_product.count()):
            item = self.item_product.nth(i)
            products.append({"name": self.text(item.get_by_test_id(CHECKOUT_LOCATORS["item_product_name"])),
                             "price": self.text(item.get_by_test_id(CHECKOUT_LOCATORS["item_product_price"])),
                             "description": self.text(item.get_by_test_id(CHECKOUT_LOCATORS["item_product_desc"]))})
        return products

    def get_payment_information(self) -> str:
        return self.text(self.payment_information)

    def get_shipping_information(self) -> str:
        return self.text(self.shipping_information)

    def get_item_total_price(self) -> str:
        return self.text(self.item_total)

    def get_tax_price(self) -> str:
        return self.text(self.tax)

    def get_total_price(self) -> str:
        return self.text(self.total)

    # ================= 手动计算 =================
    def sum_products_price(self) -> Decimal:
        # 显式指定 sum 初始值="0"
        return sum((parse_money(p["price"]) for p in self.get_order_products()), Decimal("0"))

    # ========== 基本验证 ==========
    def verify_payment_info_displayed(self, expect_text: str = None):
        self.expect_visible(self.payment_information, "支付信息应显示")
        if expect_text:
            CheckOutAssert.tips_message(self.get_payment_information(), expect_text)

    def verify_shipping_info_displayed(self, expect_text: str = None):
        self.expect_visible(self.shipping_information, "配送信息应显示")
        if expect_text:
            CheckOutAssert.tips_message(self.get_shipping_information(), expect_text)

    def verify_item_count(self, expect_count: int):
        self.expect_count(self.item_product, expect_count, f"订单确认页应有 {expect_count} 个商品")

    def verify_products_match(self, added_products: list):
        """added_products 为 Product 列表"""
        self.verify_item_count(len(added_products))
        expected = [p.info() for p in added_products]
        order_products = self.get_order_products()
        CheckOutAssert.product_count(expected, order_products)
        CheckOutAssert.product_detail_match(expected, order_products)

    def verify_order_base_info(self):
        CheckOutAssert.not_empty(self.get_payment_information())
        CheckOutAssert.not_empty(self.get_shipping_information())
        # 验证item total / tax / total 格式
        CheckOutAssert.price_format(self.get_item_total_price())
        CheckOutAssert.price_format(self.get_tax_price())
        CheckOutAssert.price_format(self.get_total_price())
        # 验证商品总价格
        CheckOutAssert.price_equal(self.sum_products_price(), parse_money(self.get_item_total_price()), "商品总价")
        self.verify_total_consistent()

    def verify_total_consistent(self):
        """页面 total = 页面 subtotal + 页面 tax"""
        CheckOutAssert.order_price(parse_money(self.get_item_total_price()), parse_money(self.get_tax_price()),
                                   parse_money(self.get_total_price()))

    def verify_price_summary(self, added_products: list):
        """按商品目录单价重新计算 subtotal / tax / total，与页面展示比对"""
        expect = calc_order_summary([p.price for p in added_products])
        self.expect_contains_text(self.item_total, format_money(expect.subtotal), "商品总价不一致")
        CheckOutAssert.price_equal(expect.subtotal, parse_money(self.get_item_total_price()), "商品总价")
        CheckOutAssert.price_equal(expect.tax, parse_money(self.get_tax_price()), "税费")
        CheckOutAssert.price_equal(expect.total, parse_money(self.get_total_price()), "订单总价")

    def verify_navigation_to_complete(self):
        self.expect_url(route_pattern(Screen.CHECKOUT_COMPLETE), "提交订单后应进入完成页")
        self.verify_title(CHECKOUT_COMPLETE_TITLE)


class CheckOutCompletePage(StorePage):
    """checkout-complete 下单完成"""
    screen = Screen.CHECKOUT_COMPLETE

    def __init__(self, page: Page):
        super().__init__(page)
        self.finish_message = page.get_by_test_id(CHECKOUT_LOCATORS["finish_page_message"])
        self.finish_text = page.get_by_test_id(CHECKOUT_LOCATORS["finish_page_text"])
        self.pony_express_image = page.get_by_test_id(CHECKOUT_LOCATORS["pony_express"])
        self.back_to_products_button = page.get_by_test_id(CHECKOUT_LOCATORS["back_to_products"])

    # ========== 页面行为 ==========
    def navigate(self):
        self.open(URLS[ENV]["checkout_complete"])
        self.wait_visible(self.finish_message)

    def back_to_products(self):
        self.click(self.back_to_products_button)
        self.wait_screen(Screen.INVENTORY)

    # ================= 数据获取 =================
    def get_complete_header(self) -> str:
        return self.text(self.finish_message)

    def get_complete_text(self) -> str:
        return self.text(self.finish_text)

    # ========== 提交订单页面 ==========
    def verify_complete_header(self, finish_message: str):
        self.expect_text(self.finish_message, finish_message, f"完成页标题应为 {finish_message}")

    def verify_complete_text(self, expect_text: str):
        CheckOutAssert.tips_message(self.get_complete_text(), expect_text)

    def verify_pony_express_image(self):
        self.expect_visible(self.pony_express_image, "完成页应显示 Pony Express 图片")

    def verify_navigation_to_inventory(self):
        self.expect_url(route_pattern(Screen.INVENTORY), "应返回商品列表页")
