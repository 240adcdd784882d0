"""环境配置：站点地址、浏览器、超时、业务常量"""
import os
from decimal import Decimal


ENV = os.getenv("TEST_ENV", "prod")

URLS = {
    "prod": {
        "base": "https://www.saucedemo.com",
        "login": "https://www.saucedemo.com/",
        "inventory": "https://www.saucedemo.com/inventory.html",
        "product": "https://www.saucedemo.com/inventory-item.html?id={id}",
        "cart": "https://www.saucedemo.com/cart.html",
        "checkout_step_one": "https://www.saucedemo.com/checkout-step-one.html",
        "checkout_step_two": "https://www.saucedemo.com/checkout-step-two.html",
        "checkout_complete": "https://www.saucedemo.com/checkout-complete.html",
    },
}

# 浏览器
BROWSER = os.getenv("BROWSER", "chromium")  # chromium / firefox / webkit
HEADLESS = os.getenv("HEADLESS", "1") != "0" or bool(os.getenv("CI", False))

# 超时（毫秒）
DEFAULT_TIMEOUT_MS = int(os.getenv("DEFAULT_TIMEOUT_MS", "5000"))
LONG_TIMEOUT_MS = int(os.getenv("LONG_TIMEOUT_MS", "10000"))  # performance_glitch_user 专用

# 订单税率，线上站点按 8% 计税
TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.08"))

# fixture 账号共用密码；文档中也出现过 "secret"，以真实站点为准
FIXTURE_PASSWORD = os.getenv("SAUCE_PASSWORD", "secret_sauce")

# 登录态文件
STORAGE_DIR = "storage"
LOGIN_STATE_FILE = "storage/login.json"
