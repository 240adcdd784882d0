import re
from decimal import Decimal

from playwright.sync_api import Page

from assertions.inventory_assert import InventoryAssert
from config.locators import INVENTORY_LOCATORS
from config.pages import URLS, ENV
from data.factory import PRODUCT_TEST_IDS, ProductId
from data.inventory_data import SortOrder, FOOTER_LINKS
from pages.base_page import StorePage
from pages.screens import Screen


class InventoryPage(StorePage):
    screen = Screen.INVENTORY

    def __init__(self, page: Page):
        super().__init__(page)
        # 商品列表
        self.item_product = page.get_by_test_id(INVENTORY_LOCATORS["item_product"])

        # 商品明细
        self.item_product_name = page.get_by_test_id(INVENTORY_LOCATORS["item_product_name"])
        self.item_product_price = page.get_by_test_id(INVENTORY_LOCATORS["item_product_price"])
        self.item_product_desc = page.get_by_test_id(INVENTORY_LOCATORS["item_product_desc"])
        self.item_product_img = self.item_product.get_by_role("img")

        # 排序下拉框
        self.product_sort_type = page.get_by_test_id(INVENTORY_LOCATORS["product_sort_type"])
        self.sort_options = self.product_sort_type.get_by_role("option")

    # ================= 商品按钮 =================
    def add_button(self, product_id: ProductId):
        slug = PRODUCT_TEST_IDS[product_id]
        return self.page.get_by_test_id(INVENTORY_LOCATORS["add_to_cart"].format(slug=slug))

    def remove_button(self, product_id: ProductId):
        slug = PRODUCT_TEST_IDS[product_id]
        return self.page.get_by_test_id(INVENTORY_LOCATORS["remove"].format(slug=slug))

    # ================= 页面行为 =================
    def navigate(self):
        self.open(URLS[ENV]["inventory"])
        self.wait_visible(self.item_product)

    def add_product_to_cart(self, product_id: ProductId):
        self.click(self.add_button(product_id))

    def add_products_to_cart(self, product_ids: list):
        for product_id in product_ids:
            self.add_product_to_cart(product_id)

    def remove_product_from_cart(self, product_id: ProductId):
        self.click(self.remove_button(product_id))

    # 选择排序方式
    def sort_by(self, order: SortOrder):
        self.select(self.product_sort_type, order.key)

    def open_product(self, product_id: ProductId):
        """点击商品名称进入详情页"""
        link = self.page.get_by_test_id(INVENTORY_LOCATORS["item_title_link"].format(id=product_id.value))
        self.click(link)
        self.wait_screen(Screen.PRODUCT_DETAIL)

    # ================= 数据获取 =================
    def get_product_count(self) -> int:
        return self.get_count(self.item_product)

    def get_product_names(self) -> list[str]:
        return self.get_texts(self.item_product_name)

    def get_product_description(self) -> list[str]:
        return self.get_texts(self.item_product_desc)

    def get_product_imgs(self) -> list[str]:
        return self.get_attrs(self.item_product_img, "src")

    def get_product_prices(self) -> list[str]:
        return self.get_texts(self.item_product_price)

    def get_product_prices_as_number(self) -> list[Decimal]:
        return [Decimal(p.replace("$", "")) for p in self.get_product_prices()]

    def get_product_info_by_index(self, index: int) -> dict:
        """保存单商品基本信息"""
        item = self.item_product.nth(index)
        return {
            "name": self.text(item.get_by_test_id(INVENTORY_LOCATORS["item_product_name"])),
            "price": self.text(item.get_by_test_id(INVENTORY_LOCATORS["item_product_price"])),
            "description": self.text(item.get_by_test_id(INVENTORY_LOCATORS["item_product_desc"])),
        }

    def get_products(self) -> list[dict]:
        return [self.get_product_info_by_index(i) for i in range(self.get_product_count())]

    def get_current_sort(self) -> str:
        return self.product_sort_type.input_value()

    def get_sort_option_labels(self) -> list[str]:
        return [label.strip() for label in self.sort_options.all_text_contents()]

    # ========== 基础校验 ==========
    def verify_base_info(self, expect_count: int):
        self.expect_count(self.item_product, expect_count, f"商品列表应有 {expect_count} 个商品")
        InventoryAssert.product_count(self.get_product_count(), expect_count)  # 商品数量一致
        InventoryAssert.column_not_empty(self.get_product_names())  # 商品名称非空
        InventoryAssert.column_not_empty(self.get_product_description())  # 商品描述非空
        InventoryAssert.column_not_empty(self.get_product_imgs())  # 商品图片非空
        InventoryAssert.product_price_format(self.get_product_prices())  # 商品价格格式
        InventoryAssert.product_price_is_decimal(self.get_product_prices_as_number())  # 商品价格是Decimal

    def verify_sorted(self, order: SortOrder):
        if order is SortOrder.NAME_AZ:
            InventoryAssert.sort_asc(self.get_product_names())
        elif order is SortOrder.NAME_ZA:
            InventoryAssert.sort_desc(self.get_product_names())
        elif order is SortOrder.PRICE_LOW_HIGH:
            InventoryAssert.sort_asc(self.get_product_prices_as_number())
        else:
            InventoryAssert.sort_desc(self.get_product_prices_as_number())

    def verify_current_sort(self, order: SortOrder):
        InventoryAssert.option_equal(self.get_current_sort(), order.key)

    def verify_first_name(self, expect_name: str):
        InventoryAssert.first_item(self.get_product_names(), expect_name)

    def verify_first_price(self, expect_price: str):
        InventoryAssert.first_item(self.get_product_prices(), expect_price)

    def verify_catalog_intact(self, before: list):
        """before 为排序前 get_products() 的结果，或 Product 列表"""
        before_items = [tuple(p.info().values()) if hasattr(p, "info") else tuple(p.values()) for p in before]
        after_items = [tuple(p.values()) for p in self.get_products()]
        InventoryAssert.same_items(before_items, after_items)

    def verify_sort_options(self):
        self.expect_count(self.sort_options, len(SortOrder), f"排序下拉框应有 {len(SortOrder)} 个选项")
        actual = self.get_sort_option_labels()
        expect_labels = [order.label for order in SortOrder]
        InventoryAssert.option_equal(actual, expect_labels)

    def verify_add_button_visible(self, product_id: ProductId):
        button = self.add_button(product_id)
        self.expect_visible(button, f"{product_id.name} 应显示 Add to cart 按钮")
        self.expect_text(button, "Add to cart", f"{product_id.name} 按钮文案应为 Add to cart")

    def verify_remove_button_visible(self, product_id: ProductId):
        button = self.remove_button(product_id)
        self.expect_visible(button, f"{product_id.name} 应显示 Remove 按钮")
        self.expect_text(button, "Remove", f"{product_id.name} 按钮文案应为 Remove")

    def verify_broken_images(self):
        """problem_user 的商品图片都是 404 占位图"""
        self.expect_attribute(self.item_product_img.first, "src", re.compile(r"404"), "problem_user 应显示 404 图片")
        InventoryAssert.all_contain(self.get_product_imgs(), "404")

    def verify_footer_links(self):
        for name, href in FOOTER_LINKS.items():
            link = self.page.get_by_role("link", name=name)
            self.expect_visible(link, f"页脚应显示 {name} 链接")
            self.expect_attribute(link, "href", href, f"{name} 链接地址应为 {href}")
