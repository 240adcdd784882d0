"""login功能测试用例：登录错误提示信息
用户名和密码都为空
密码为空
用户名为空
用户被锁定
账号不存在 / 密码错误
"""

LOCKED_OUT_ERROR_MSG = "Sorry, this user has been locked out"
INVALID_CREDENTIALS_ERROR_MSG = "Epic sadface"
NOT_MATCH_ERROR_MSG = "Username and password do not match any user in this service"
NOT_LOGGED_IN_ERROR_MSG = "You can only access '/inventory.html' when you are logged in"

LOGIN_FAIL_CASES = {
    "empty_username_password": {"username": "", "password": "", "error_msg": "Username is required"},
    "empty_password": {"username": "standard_user", "password": "", "error_msg": "Password is required"},
    "empty_username": {"username": "", "password": "secret_sauce", "error_msg": "Username is required"},
    "wrong_password": {"username": "standard_user", "password": "12345", "error_msg": NOT_MATCH_ERROR_MSG},
}

LONG_USERNAME = "a" * 1000
SPECIAL_CHAR_USERNAME = "test@user.com"
