import allure
import pytest

from config.pages import LONG_TIMEOUT_MS
from data.factory import Role, make_user, make_random_user
from data.login_data import (LOGIN_FAIL_CASES, LOCKED_OUT_ERROR_MSG, INVALID_CREDENTIALS_ERROR_MSG,
                             NOT_MATCH_ERROR_MSG, LONG_USERNAME, SPECIAL_CHAR_USERNAME)
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage


@pytest.fixture(scope="function")
def login_page(page):
    login_page = LoginPage(page)
    login_page.navigate()
    return login_page


@allure.feature("登录")
@pytest.mark.ui
@pytest.mark.auth
class TestLogin:

    @allure.story("登录成功")
    @allure.title("standard_user 登录成功进入商品列表")
    @pytest.mark.smoke
    def test_login_success(self, login_page, artifact_sink):
        login_page.login(make_user(Role.STANDARD))
        login_page.verify_login_success()
        artifact_sink.capture_on_success(login_page.page, "login_success")

    # 测试登录失败（场景参数化）
    @allure.story("登录失败")
    @pytest.mark.regression
    @pytest.mark.parametrize("case_key", list(LOGIN_FAIL_CASES))
    def test_login_fail(self, login_page, case_key):
        data = LOGIN_FAIL_CASES[case_key]
        login_page.login(data["username"], data["password"])
        login_page.verify_login_fail(data["error_msg"])

    @allure.story("登录失败")
    @allure.title("locked_out_user 登录提示账号被锁定")
    @pytest.mark.smoke
    def test_locked_out_user(self, login_page):
        login_page.login(make_user(Role.LOCKED_OUT))
        login_page.verify_login_fail(LOCKED_OUT_ERROR_MSG)

    @allure.story("登录失败")
    @allure.title("不存在的账号登录提示用户名密码不匹配")
    @pytest.mark.regression
    def test_unknown_credentials(self, login_page):
        login_page.login(make_random_user(seed=2024))
        login_page.verify_login_fail(INVALID_CREDENTIALS_ERROR_MSG)
        login_page.verify_error_message(NOT_MATCH_ERROR_MSG)

    @allure.story("登录失败")
    @pytest.mark.regression
    @pytest.mark.parametrize("username", [LONG_USERNAME, SPECIAL_CHAR_USERNAME], ids=["long", "special_char"])
    def test_abnormal_username(self, login_page, username):
        login_page.login(make_random_user(seed=7, username=username))
        login_page.verify_login_fail(NOT_MATCH_ERROR_MSG)

    @allure.story("登录失败")
    @allure.title("重复校验错误提示结果一致")
    @pytest.mark.regression
    def test_error_message_verify_twice(self, login_page):
        login_page.login(make_user(Role.LOCKED_OUT))
        login_page.verify_error_message(LOCKED_OUT_ERROR_MSG)
        login_page.verify_error_message(LOCKED_OUT_ERROR_MSG)

    @allure.story("特殊账号")
    @allure.title("performance_glitch_user 放宽等待后登录成功")
    @pytest.mark.slow
    def test_performance_glitch_user(self, login_page):
        login_page.login(make_user(Role.PERFORMANCE_GLITCH))
        login_page.verify_login_success(timeout=LONG_TIMEOUT_MS)

    @allure.story("特殊账号")
    @allure.title("problem_user 商品图片全部为 404 占位图")
    @pytest.mark.regression
    def test_problem_user_broken_images(self, login_page):
        login_page.login(make_user(Role.PROBLEM))
        login_page.verify_login_success()
        InventoryPage(login_page.page).verify_broken_images()

    @allure.story("登出")
    @pytest.mark.smoke
    def test_logout(self, login_page):
        login_page.login(make_user(Role.STANDARD))
        login_page.verify_login_success()
        InventoryPage(login_page.page).logout()
        login_page.verify_on_screen()
        login_page.verify_login_form_visible()
