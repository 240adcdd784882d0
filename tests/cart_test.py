import allure
import pytest

from data.cart_data import SINGLE_PRODUCT, THREE_PRODUCTS, ALL_PRODUCTS, ADD_PRODUCTS, REMOVE_PRODUCTS
from data.factory import ProductId, product_by_id
from pages.cart_page import CartPage
from pages.inventory_page import InventoryPage
from pages.product_page import ProductDetailPage


@pytest.fixture(scope="function")
def inventory_page(page):
    inventory_page = InventoryPage(page)
    inventory_page.navigate()
    return inventory_page


@pytest.fixture(scope="function")
def cart_page(page):
    return CartPage(page)


@allure.feature("购物车")
@pytest.mark.ui
@pytest.mark.cart
@pytest.mark.need_login
class TestCart:

    @allure.story("加购")
    @pytest.mark.smoke
    @pytest.mark.parametrize("product_ids", [SINGLE_PRODUCT, THREE_PRODUCTS, ALL_PRODUCTS],
                             ids=["single", "three", "all"])
    def test_add_product(self, inventory_page, product_ids):
        """验证从inventory页面添加商品，角标=加购数量，按钮变为Remove"""
        inventory_page.add_products_to_cart(product_ids)
        inventory_page.verify_cart_badge_count(len(product_ids))
        for product_id in product_ids:
            inventory_page.verify_remove_button_visible(product_id)

    @allure.story("删除")
    @pytest.mark.regression
    def test_remove_product_from_inventory(self, inventory_page):
        """加购N件删除M件，角标=N-M"""
        inventory_page.add_products_to_cart(ADD_PRODUCTS)
        for product_id in REMOVE_PRODUCTS:
            inventory_page.remove_product_from_cart(product_id)
            inventory_page.verify_add_button_visible(product_id)
        inventory_page.verify_cart_badge_count(len(ADD_PRODUCTS) - len(REMOVE_PRODUCTS))

    @allure.story("删除")
    @pytest.mark.regression
    def test_remove_all_hides_badge(self, inventory_page):
        """购物车清空后角标不显示"""
        inventory_page.add_products_to_cart(ADD_PRODUCTS)
        for product_id in ADD_PRODUCTS:
            inventory_page.remove_product_from_cart(product_id)
        inventory_page.verify_cart_badge_count(0)

    @allure.story("删除")
    @pytest.mark.regression
    def test_remove_product_from_cart(self, inventory_page, cart_page):
        """验证从cart页面删除商品"""
        inventory_page.add_products_to_cart(ADD_PRODUCTS)
        inventory_page.open_cart()
        for product_id in REMOVE_PRODUCTS:
            cart_page.remove_item(product_id)
        remaining = [product_by_id(pid) for pid in ADD_PRODUCTS if pid not in REMOVE_PRODUCTS]
        cart_page.verify_products_match(remaining)
        cart_page.verify_badge_matches_items()

    @allure.story("购物车页面")
    @pytest.mark.smoke
    def test_cart_products_info(self, inventory_page, cart_page, artifact_sink):
        """验证列表页加购的商品信息=购物车页面显示的商品信息"""
        inventory_page.add_products_to_cart(THREE_PRODUCTS)
        inventory_page.open_cart()
        cart_page.verify_cart_title()
        cart_page.verify_products_match([product_by_id(pid) for pid in THREE_PRODUCTS])
        cart_page.verify_cart_badge_count(len(THREE_PRODUCTS))
        cart_page.verify_checkout_button_enabled()
        artifact_sink.capture_on_success(cart_page.page, "cart_products_info")

    @allure.story("购物车页面")
    @pytest.mark.regression
    def test_empty_cart(self, inventory_page, cart_page):
        inventory_page.open_cart()
        cart_page.verify_cart_is_empty()
        cart_page.verify_cart_badge_count(0)

    @allure.story("购物车页面")
    @pytest.mark.regression
    def test_continue_shopping(self, inventory_page, cart_page):
        """继续购物后再加购，购物车保留之前的商品"""
        inventory_page.add_product_to_cart(ProductId.BACKPACK)
        inventory_page.open_cart()
        cart_page.continue_shopping()
        inventory_page.add_product_to_cart(ProductId.ONESIE)
        inventory_page.open_cart()
        cart_page.verify_item_in_cart(product_by_id(ProductId.BACKPACK).name)
        cart_page.verify_item_in_cart(product_by_id(ProductId.ONESIE).name)
        cart_page.verify_cart_item_count(2)

    @allure.story("商品详情加购")
    @pytest.mark.regression
    def test_add_from_product_detail(self, page, cart_page):
        detail_page = ProductDetailPage(page)
        detail_page.navigate(ProductId.BIKE_LIGHT)
        detail_page.add_to_cart()
        detail_page.verify_cart_badge_count(1)
        detail_page.remove_from_cart()
        detail_page.verify_cart_badge_count(0)
        detail_page.add_to_cart()
        detail_page.open_cart()
        cart_page.verify_products_match([product_by_id(ProductId.BIKE_LIGHT)])
