from playwright.sync_api import Page

from config.locators import PRODUCT_LOCATORS
from config.pages import URLS, ENV
from data.factory import Product, ProductId
from pages.base_page import StorePage
from pages.screens import Screen


class ProductDetailPage(StorePage):
    """商品详情页 /inventory-item.html?id=<n>"""
    screen = Screen.PRODUCT_DETAIL

    def __init__(self, page: Page):
        super().__init__(page)
        self.product_name = page.get_by_test_id(PRODUCT_LOCATORS["name"])
        self.product_price = page.get_by_test_id(PRODUCT_LOCATORS["price"])
        self.product_desc = page.get_by_test_id(PRODUCT_LOCATORS["desc"])
        self.add_button = page.get_by_test_id(PRODUCT_LOCATORS["add_to_cart"])
        self.remove_button = page.get_by_test_id(PRODUCT_LOCATORS["remove"])
        self.back_button = page.get_by_test_id(PRODUCT_LOCATORS["back_to_products"])

    # ================= 页面行为 =================
    def navigate(self, product_id: ProductId):
        self.open(URLS[ENV]["product"].format(id=product_id.value))
        self.wait_visible(self.product_name)

    def add_to_cart(self):
        self.click(self.add_button)

    def remove_from_cart(self):
        self.click(self.remove_button)

    def back_to_products(self):
        self.click(self.back_button)
        self.wait_screen(Screen.INVENTORY)

    # ================= 基础验证 =================
    def verify_product(self, product: Product):
        self.expect_url(rf"/inventory-item\.html\?id={product.id.value}$", f"应打开 {product.name} 详情页")
        self.expect_text(self.product_name, product.name, "详情页商品名称不一致")
        self.expect_text(self.product_price, product.price, "详情页商品价格不一致")
        self.expect_contains_text(self.product_desc, product.description, "详情页商品描述不一致")
