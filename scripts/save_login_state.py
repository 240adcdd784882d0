import logging
from pathlib import Path

from playwright.sync_api import Browser, sync_playwright

from config.pages import BROWSER, HEADLESS, STORAGE_DIR, LOGIN_STATE_FILE
from data.factory import Role, make_user
from pages.login_page import LoginPage

logger = logging.getLogger(__name__)


def login_and_store(browser: Browser, role: Role = Role.STANDARD, path: str = LOGIN_STATE_FILE) -> Path:
    """用已启动的浏览器登录，并把登录态保存到 path"""
    context = browser.new_context()
    try:
        page = context.new_page()
        # 使用 Page Object 登录
        login_page = LoginPage(page)
        login_page.navigate()
        login_page.login(make_user(role))
        login_page.verify_login_success()

        Path(STORAGE_DIR).mkdir(exist_ok=True)  # 确保storage目录一直存在
        context.storage_state(path=path)
    finally:
        context.close()

    # 再次校验文件
    login_path = Path(path)
    if not login_path.exists() or login_path.stat().st_size == 0:
        raise RuntimeError(f"{path} 生成失败，请检查浏览器或账号")
    logger.info("登录态已生成 -> %s", path)
    return login_path


def save_login_state(role: Role = Role.STANDARD, path: str = LOGIN_STATE_FILE) -> Path:
    """生成登录态
        单独执行该脚本命令：python -m scripts.save_login_state
    """
    with sync_playwright() as p:
        p.selectors.set_test_id_attribute("data-test")
        browser = getattr(p, BROWSER).launch(headless=HEADLESS)
        try:
            return login_and_store(browser, role, path)
        finally:
            browser.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    save_login_state()
