from playwright.sync_api import Page

from assertions.cart_assert import CartAssert
from config.locators import CART_LOCATORS
from config.pages import URLS, ENV
from data.factory import PRODUCT_TEST_IDS, ProductId
from pages.base_page import StorePage
from pages.screens import Screen


class CartPage(StorePage):
    screen = Screen.CART

    def __init__(self, page: Page):
        super().__init__(page)
        self.cart_items = page.get_by_test_id(CART_LOCATORS["cart_item"])  # 购物车商品行
        self.item_product_name = page.get_by_test_id(CART_LOCATORS["item_product_name"])  # 单商品名称
        self.continue_shopping_button = page.get_by_test_id(CART_LOCATORS["continue"])  # continue-shopping按钮
        self.checkout_button = page.get_by_test_id(CART_LOCATORS["checkout_button"])  # 结算按钮

    # ================= 页面行为 =================
    def navigate(self):
        self.open(URLS[ENV]["cart"])
        self.wait_visible(self.checkout_button)

    def remove_item(self, product_id: ProductId):
        remove = self.page.get_by_test_id(CART_LOCATORS["remove"].format(slug=PRODUCT_TEST_IDS[product_id]))
        self.click(remove)

    def continue_shopping(self):
        self.click(self.continue_shopping_button)
        self.wait_screen(Screen.INVENTORY)

    def checkout(self):
        self.click(self.checkout_button)
        self.wait_screen(Screen.CHECKOUT_INFO)

    # ================= 数据获取 =================
    def get_cart_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def get_cart_products(self) -> list[dict]:
        """ 保存购物车页面商品信息list"""
        products = []
        for i in range(self.cart_items.count()):
            item = self.cart_items.nth(i)
            products.append({"name": self.text(item.get_by_test_id(CART_LOCATORS["item_product_name"])),
                             "price": self.text(item.get_by_test_id(CART_LOCATORS["item_product_price"])),
                             "description": self.text(item.get_by_test_id(CART_LOCATORS["item_product_desc"]))})
        return products

    # ================= 基础验证 =================
    def verify_cart_title(self):
        self.verify_title("Your Cart")

    def verify_cart_item_count(self, expect_count: int):
        self.expect_count(self.cart_items, expect_count, f"购物车应有 {expect_count} 个商品")
        CartAssert.item_count(self.get_cart_item_count(), expect_count)

    def verify_cart_is_empty(self):
        self.verify_cart_item_count(0)

    def verify_item_in_cart(self, product_name: str):
        item_name = self.item_product_name.filter(has_text=product_name)
        self.expect_visible(item_name, f"商品 {product_name} 应在购物车中")

    def verify_badge_matches_items(self):
        """角标数量 = 购物车行数"""
        CartAssert.cart_badge_count(self.get_cart_badge_count(), self.get_cart_item_count())

    def verify_products_match(self, added_products: list):
        """added_products 为 Product 列表：加购商品与购物车页面商品一致"""
        self.expect_count(self.cart_items, len(added_products), f"购物车应有 {len(added_products)} 个商品")
        expected = [p.info() for p in added_products]
        cart_products = self.get_cart_products()
        CartAssert.added_product_count(expected, cart_products)
        CartAssert.product_detail_info(expected, cart_products)

    def verify_checkout_button_enabled(self):
        self.expect_enabled(self.checkout_button, "Checkout 按钮应可点击")
