from playwright.sync_api import Page

from assertions.login_assert import LoginAssert
from config.locators import LOGIN_LOCATORS
from config.pages import URLS, ENV
from pages.base_page import BasePage
from pages.screens import Screen


class LoginPage(BasePage):
    screen = Screen.LOGIN

    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = page.get_by_test_id(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.get_by_test_id(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.get_by_test_id(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.get_by_test_id(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息

        # 登录成功后 inventory 页面标志
        self.products_title = page.get_by_text("Products", exact=True)
        self.sort_dropdown = page.get_by_role("combobox")
        self.add_to_cart_buttons = page.get_by_role("button", name="Add to cart")

    # ================= 页面行为 =================
    def navigate(self):
        self.open(URLS[ENV]["login"])
        self.wait_visible(self.username_input)

    def fill_username(self, username: str):
        self.fill(self.username_input, username)

    def fill_password(self, password: str):
        self.fill(self.password_input, password)

    def fill_credentials(self, username: str, password: str):
        self.fill_username(username)
        self.fill_password(password)

    def click_login(self):
        self.click(self.login_button)

    def login(self, username, password: str = None):
        """login(user) 或 login(username, password)"""
        if password is None:
            username, password = username.username, username.password
        self.fill_credentials(username, password)
        self.click_login()

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.text(self.error_message)

    def is_error_message_visible(self) -> bool:
        return self.is_visible(self.error_message)

    # ========== 登录校验 ==========
    def verify_login_success(self, timeout: float = None):
        """timeout 只给 performance_glitch_user 这类慢账号放宽等待，超时抛 PageTimeout"""
        self.wait_screen(Screen.INVENTORY, timeout)
        self.expect_visible(self.products_title, "登录后页面应显示 Products 标题", timeout)
        self.expect_visible(self.sort_dropdown, "登录后页面应显示商品排序下拉框")
        self.expect_visible(self.add_to_cart_buttons.first, "登录后页面应显示 Add to cart 按钮")

    def verify_login_fail(self, expect_msg: str):
        self.verify_error_message(expect_msg)
        self.verify_on_screen()

    def verify_error_message(self, expect_msg: str):
        self.expect_visible(self.error_message, "登录错误提示应显示")
        LoginAssert.error_message(self.get_error_message(), expect_msg)

    def verify_login_form_visible(self):
        self.expect_visible(self.username_input, "用户名输入框应可见")
        self.expect_visible(self.password_input, "密码输入框应可见")
        self.expect_visible(self.login_button, "登录按钮应可见")
