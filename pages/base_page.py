import logging
import re
from contextlib import contextmanager

from playwright.sync_api import Page, Locator, expect, TimeoutError as PlaywrightTimeoutError

from assertions.cart_assert import CartAssert
from config.locators import HEADER_LOCATORS
from pages.screens import Screen, route_pattern
from utils.errors import AssertionMismatch, PageTimeout

logger = logging.getLogger(__name__)


class BasePage:
    # 子类指定页面对应的 Screen
    screen: Screen = None

    def __init__(self, page: Page):
        self.page = page

    @contextmanager
    def bounded(self, action: str):
        """Playwright 等待超时统一转换为 PageTimeout，与业务断言失败区分开"""
        try:
            yield
        except PlaywrightTimeoutError as e:
            raise PageTimeout(f"{action} 超时（当前页面：{self.page.url}）：{e.message}") from e

    # ========= 基础动作 =========
    def open(self, url: str):
        logger.info("打开页面 %s", url)
        with self.bounded(f"打开 {url}"):
            self.page.goto(url)

    def click(self, locator: Locator):
        with self.bounded(f"点击 {locator}"):
            locator.scroll_into_view_if_needed()
            locator.click()

    def fill(self, locator: Locator, value: str):
        with self.bounded(f"输入 {locator}"):
            locator.fill(value)

    def select(self, locator: Locator, value: str):
        with self.bounded(f"选择 {locator}"):
            locator.select_option(value)

    def text(self, locator: Locator) -> str:
        with self.bounded(f"读取 {locator}"):
            return locator.inner_text()

    def get_texts(self, locator: Locator) -> list[str]:
        return [self.text(locator.nth(i)) for i in range(locator.count())]

    def get_attr(self, locator: Locator, attr: str) -> str:
        with self.bounded(f"读取属性 {attr}"):
            return locator.get_attribute(attr)

    def get_attrs(self, locator: Locator, attr: str) -> list[str]:
        return [self.get_attr(locator.nth(i), attr) for i in range(locator.count())]

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    def is_visible(self, locator: Locator) -> bool:
        return locator.is_visible()

    # ========= 等待 =========
    def wait_visible(self, locator: Locator, timeout: float = None):
        with self.bounded(f"等待 {locator} 可见"):
            locator.first.wait_for(state="visible", timeout=timeout)

    def wait_url(self, pattern: str, timeout: float = None):
        with self.bounded(f"等待跳转 {pattern}"):
            self.page.wait_for_url(re.compile(pattern), timeout=timeout)

    def wait_screen(self, screen: Screen, timeout: float = None):
        self.wait_url(route_pattern(screen), timeout)

    # ========= 带重试的断言 =========
    # 重试交给 Playwright expect，失败统一抛 AssertionMismatch
    def _expect(self, assertion, message: str):
        try:
            assertion()
        except AssertionError as e:
            raise AssertionMismatch(f"{message}\n{e}") from e

    def expect_visible(self, locator: Locator, message: str, timeout: float = None):
        self._expect(lambda: expect(locator).to_be_visible(timeout=timeout), message)

    def expect_hidden(self, locator: Locator, message: str, timeout: float = None):
        self._expect(lambda: expect(locator).to_be_hidden(timeout=timeout), message)

    def expect_enabled(self, locator: Locator, message: str):
        self._expect(lambda: expect(locator).to_be_enabled(), message)

    def expect_count(self, locator: Locator, count: int, message: str):
        self._expect(lambda: expect(locator).to_have_count(count), message)

    def expect_text(self, locator: Locator, text: str, message: str):
        self._expect(lambda: expect(locator).to_have_text(text), message)

    def expect_contains_text(self, locator: Locator, text: str, message: str):
        self._expect(lambda: expect(locator).to_contain_text(text), message)

    def expect_attribute(self, locator: Locator, name: str, value, message: str):
        self._expect(lambda: expect(locator).to_have_attribute(name, value), message)

    def expect_url(self, pattern: str, message: str, timeout: float = None):
        self._expect(lambda: expect(self.page).to_have_url(re.compile(pattern), timeout=timeout), message)

    # ========= 页面校验 =========
    def verify_on_screen(self, timeout: float = None):
        """当前 URL 属于本页面"""
        self.expect_url(route_pattern(self.screen), f"期望停留在 {self.screen.name} 页面", timeout)


class StorePage(BasePage):
    """登录后页面公共部分：顶部购物车、标题、左侧菜单"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.title = page.get_by_test_id(HEADER_LOCATORS["title"])  # 页面标题
        self.shopping_cart_link = page.get_by_test_id(HEADER_LOCATORS["shopping_cart_link"])  # 购物车icon
        self.shopping_cart_badge = page.get_by_test_id(HEADER_LOCATORS["shopping_cart_badge"])  # 购物车角标
        self.app_logo = page.locator(".app_logo")  # Swag Labs logo，没有 data-test 属性

        # 菜单
        self.menu_open_button = page.get_by_role("button", name=HEADER_LOCATORS["menu_open"])
        self.menu_close_button = page.get_by_role("button", name=HEADER_LOCATORS["menu_close"])
        self.all_items_link = page.get_by_test_id(HEADER_LOCATORS["all_items_link"])
        self.about_link = page.get_by_test_id(HEADER_LOCATORS["about_link"])
        self.logout_link = page.get_by_test_id(HEADER_LOCATORS["logout_link"])
        self.reset_link = page.get_by_test_id(HEADER_LOCATORS["reset_link"])
        # 菜单关闭时容器 aria-hidden，按 role 定位不到菜单项
        self.menu_items = page.get_by_role("link", name="Logout")
        self.menu_overlay = page.locator(".bm-overlay")  # 菜单打开时覆盖页面主体的遮罩

    # ================= 页面行为 =================
    def open_cart(self):
        self.click(self.shopping_cart_link)
        self.wait_screen(Screen.CART)

    def open_menu(self):
        self.click(self.menu_open_button)
        self.wait_visible(self.menu_items)

    def close_menu(self):
        self.click(self.menu_close_button)

    def close_menu_by_outside_click(self):
        self.click(self.menu_overlay)

    def logout(self):
        self.open_menu()
        self.click(self.logout_link)
        self.wait_screen(Screen.LOGIN)

    def reset_app_state(self):
        self.open_menu()
        self.click(self.reset_link)

    def go_to_all_items(self):
        self.open_menu()
        self.click(self.all_items_link)
        self.wait_screen(Screen.INVENTORY)

    def go_to_about(self):
        self.open_menu()
        self.click(self.about_link)
        self.wait_url(r"saucelabs\.com")

    # ================= 数据获取 =================
    def get_cart_badge_count(self) -> int:
        # 购物车为空时角标不显示
        if self.shopping_cart_badge.count() == 0:
            return 0
        return int(self.text(self.shopping_cart_badge))

    def get_title(self) -> str:
        return self.text(self.title)

    # ================= 基础验证 =================
    def verify_cart_badge_count(self, expect_count: int):
        if expect_count == 0:
            self.expect_count(self.shopping_cart_badge, 0, "购物车为空时角标不应显示")
        else:
            self.expect_text(self.shopping_cart_badge, str(expect_count), f"购物车角标应显示 {expect_count}")
        CartAssert.cart_badge_count(self.get_cart_badge_count(), expect_count)

    def verify_title(self, expect_title: str):
        self.expect_text(self.title, expect_title, f"页面标题应为 {expect_title}")

    def verify_app_logo(self):
        self.expect_text(self.app_logo, "Swag Labs", "页面顶部应显示 Swag Labs logo")

    def verify_menu_open(self):
        self.expect_visible(self.menu_items, "菜单应处于打开状态")

    def verify_menu_closed(self):
        self.expect_count(self.menu_items, 0, "菜单应处于关闭状态")

    def verify_menu_items(self):
        for link, text in ((self.all_items_link, "All Items"), (self.about_link, "About"),
                           (self.logout_link, "Logout"), (self.reset_link, "Reset App State")):
            self.expect_text(link, text, f"菜单项应为 {text}")
            self.expect_enabled(link, f"菜单项 {text} 应可点击")
