"""按状态机执行用户操作序列

AppFlow 把 Action 映射到对应页面对象的操作，同时驱动 StorefrontModel，
每一步之后校验：
- 当前 URL 属于模型预测的页面
- 购物车角标 = 模型中的商品数
- 购物车页 / 订单确认页的商品行数与角标一致
"""
import logging

from playwright.sync_api import Page

from data.factory import (Role, CheckoutKind, make_user, make_random_user, make_checkout_info,
                          make_checkout_info_missing, product_by_id)
from data.login_data import INVALID_CREDENTIALS_ERROR_MSG
from pages.cart_page import CartPage
from pages.check_out_page import CheckOutPage, CheckOutOverviewPage, CheckOutCompletePage
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage
from pages.product_page import ProductDetailPage
from pages.screens import Action, Screen, StorefrontModel, SCREENS_WITHOUT_HEADER

logger = logging.getLogger(__name__)


class AppFlow:

    def __init__(self, page: Page, user=None, checkout_info=None):
        self.page = page
        self.user = user or make_user(Role.STANDARD)
        self.checkout_info = checkout_info or make_checkout_info(CheckoutKind.VALID)
        self.model = StorefrontModel()

        self.login_page = LoginPage(page)
        self.inventory_page = InventoryPage(page)
        self.product_page = ProductDetailPage(page)
        self.cart_page = CartPage(page)
        self.checkout_page = CheckOutPage(page)
        self.overview_page = CheckOutOverviewPage(page)
        self.complete_page = CheckOutCompletePage(page)
        self.pages = {
            Screen.LOGIN: self.login_page,
            Screen.INVENTORY: self.inventory_page,
            Screen.PRODUCT_DETAIL: self.product_page,
            Screen.CART: self.cart_page,
            Screen.CHECKOUT_INFO: self.checkout_page,
            Screen.CHECKOUT_OVERVIEW: self.overview_page,
            Screen.CHECKOUT_COMPLETE: self.complete_page,
        }
        self._handlers = {
            Action.LOGIN_VALID: self._login_valid,
            Action.LOGIN_INVALID: self._login_invalid,
            Action.OPEN_CART: self._open_cart,
            Action.OPEN_PRODUCT: self._open_product,
            Action.BACK_TO_PRODUCTS: self._back_to_products,
            Action.ADD_TO_CART: self._add_to_cart,
            Action.REMOVE_FROM_CART: self._remove_from_cart,
            Action.SORT: self._sort,
            Action.CHECKOUT: self._checkout,
            Action.CONTINUE_SHOPPING: self._continue_shopping,
            Action.SUBMIT_INFO: self._submit_info,
            Action.SUBMIT_INCOMPLETE_INFO: self._submit_incomplete_info,
            Action.CANCEL: self._cancel,
            Action.FINISH: self._finish,
            Action.LOGOUT: self._logout,
        }

    @property
    def current_page(self):
        return self.pages[self.model.screen]

    # ================= 执行 =================
    def start(self):
        """回到未登录的登录页"""
        self.model = StorefrontModel()
        self.login_page.navigate()

    def perform(self, action: Action, arg=None):
        # 模型先校验，非法操作在浏览器交互前失败
        screen_before = self.model.screen
        self.model.apply(action, arg)
        logger.info("%s --%s(%s)--> %s", screen_before.name, action.name,
                    getattr(arg, "name", ""), self.model.screen.name)
        self._handlers[action](screen_before, arg)
        self.verify_state()

    def run(self, steps):
        for action, arg in steps:
            self.perform(action, arg)

    # ================= 校验 =================
    def verify_state(self):
        screen = self.model.screen
        page = self.current_page
        page.verify_on_screen()
        if screen in SCREENS_WITHOUT_HEADER:
            return
        page.verify_cart_badge_count(self.model.badge_count)
        expected = [product_by_id(pid) for pid in sorted(self.model.cart, key=lambda pid: pid.value)]
        if screen is Screen.CART:
            self.cart_page.verify_products_match(expected)
            self.cart_page.verify_badge_matches_items()
        elif screen is Screen.CHECKOUT_OVERVIEW:
            self.overview_page.verify_products_match(expected)
            self.overview_page.verify_price_summary(expected)

    # ================= Action -> 页面操作 =================
    def _login_valid(self, screen, arg):
        self.login_page.login(self.user)

    def _login_invalid(self, screen, arg):
        self.login_page.login(make_random_user())
        self.login_page.verify_error_message(INVALID_CREDENTIALS_ERROR_MSG)

    def _open_cart(self, screen, arg):
        self.pages[screen].open_cart()

    def _open_product(self, screen, product_id):
        self.inventory_page.open_product(product_id)
        self.product_page.verify_product(product_by_id(product_id))

    def _back_to_products(self, screen, arg):
        self.pages[screen].back_to_products()

    def _add_to_cart(self, screen, product_id):
        if screen is Screen.PRODUCT_DETAIL:
            self.product_page.add_to_cart()
        else:
            self.inventory_page.add_product_to_cart(product_id)

    def _remove_from_cart(self, screen, product_id):
        if screen is Screen.PRODUCT_DETAIL:
            self.product_page.remove_from_cart()
        elif screen is Screen.CART:
            self.cart_page.remove_item(product_id)
        else:
            self.inventory_page.remove_product_from_cart(product_id)

    def _sort(self, screen, order):
        before = self.inventory_page.get_products()
        self.inventory_page.sort_by(order)
        self.inventory_page.verify_current_sort(order)
        self.inventory_page.verify_sorted(order)
        self.inventory_page.verify_catalog_intact(before)

    def _checkout(self, screen, arg):
        self.cart_page.checkout()

    def _continue_shopping(self, screen, arg):
        self.cart_page.continue_shopping()

    def _submit_info(self, screen, arg):
        self.checkout_page.fill_checkout_info(self.checkout_info)
        self.checkout_page.continue_checkout()

    def _submit_incomplete_info(self, screen, arg):
        info, error_msg = make_checkout_info_missing("first_name")
        self.checkout_page.fill_checkout_info(info)
        self.checkout_page.continue_checkout()
        self.checkout_page.verify_error_message(error_msg)

    def _cancel(self, screen, arg):
        self.pages[screen].cancel()

    def _finish(self, screen, arg):
        self.overview_page.finish()

    def _logout(self, screen, arg):
        self.inventory_page.logout()
