"""站点页面状态机

页面之间的跳转关系显式写成转移表，StorefrontModel 在内存里模拟：
- 当前所在页面
- 购物车里应该有哪些商品（角标数量 = len(cart)）
离线属性测试用它随机游走校验不变量，AppFlow 用它预测真实页面应展示的状态
"""
import random
import re
from enum import Enum
from urllib.parse import urlparse

from data.factory import ProductId
from data.inventory_data import SortOrder
from utils.errors import IllegalTransition


class Screen(Enum):
    LOGIN = "login"
    INVENTORY = "inventory"
    PRODUCT_DETAIL = "product_detail"
    CART = "cart"
    CHECKOUT_INFO = "checkout_info"
    CHECKOUT_OVERVIEW = "checkout_overview"
    CHECKOUT_COMPLETE = "checkout_complete"


class Action(Enum):
    LOGIN_VALID = "login_valid"
    LOGIN_INVALID = "login_invalid"
    OPEN_CART = "open_cart"
    OPEN_PRODUCT = "open_product"
    BACK_TO_PRODUCTS = "back_to_products"
    ADD_TO_CART = "add_to_cart"
    REMOVE_FROM_CART = "remove_from_cart"
    SORT = "sort"
    CHECKOUT = "checkout"
    CONTINUE_SHOPPING = "continue_shopping"
    SUBMIT_INFO = "submit_info"
    SUBMIT_INCOMPLETE_INFO = "submit_incomplete_info"
    CANCEL = "cancel"
    FINISH = "finish"
    LOGOUT = "logout"


TRANSITIONS = {
    (Screen.LOGIN, Action.LOGIN_VALID): Screen.INVENTORY,
    (Screen.LOGIN, Action.LOGIN_INVALID): Screen.LOGIN,

    (Screen.INVENTORY, Action.OPEN_CART): Screen.CART,
    (Screen.INVENTORY, Action.OPEN_PRODUCT): Screen.PRODUCT_DETAIL,
    (Screen.INVENTORY, Action.ADD_TO_CART): Screen.INVENTORY,
    (Screen.INVENTORY, Action.REMOVE_FROM_CART): Screen.INVENTORY,
    (Screen.INVENTORY, Action.SORT): Screen.INVENTORY,
    (Screen.INVENTORY, Action.LOGOUT): Screen.LOGIN,

    (Screen.PRODUCT_DETAIL, Action.BACK_TO_PRODUCTS): Screen.INVENTORY,
    (Screen.PRODUCT_DETAIL, Action.ADD_TO_CART): Screen.PRODUCT_DETAIL,
    (Screen.PRODUCT_DETAIL, Action.REMOVE_FROM_CART): Screen.PRODUCT_DETAIL,

    (Screen.CART, Action.CHECKOUT): Screen.CHECKOUT_INFO,
    (Screen.CART, Action.CONTINUE_SHOPPING): Screen.INVENTORY,
    (Screen.CART, Action.REMOVE_FROM_CART): Screen.CART,

    (Screen.CHECKOUT_INFO, Action.SUBMIT_INFO): Screen.CHECKOUT_OVERVIEW,
    (Screen.CHECKOUT_INFO, Action.SUBMIT_INCOMPLETE_INFO): Screen.CHECKOUT_INFO,
    (Screen.CHECKOUT_INFO, Action.CANCEL): Screen.CART,  # 线上站点 step one 取消回到购物车

    (Screen.CHECKOUT_OVERVIEW, Action.FINISH): Screen.CHECKOUT_COMPLETE,
    (Screen.CHECKOUT_OVERVIEW, Action.CANCEL): Screen.INVENTORY,

    (Screen.CHECKOUT_COMPLETE, Action.BACK_TO_PRODUCTS): Screen.INVENTORY,
}

# 页面 -> URL 正则（用于 wait_url / 判断当前页面）
SCREEN_ROUTES = {
    Screen.LOGIN: r"^https?://[^/]+/(index\.html)?(\?.*)?$",
    Screen.INVENTORY: r"/inventory\.html",
    Screen.PRODUCT_DETAIL: r"/inventory-item\.html\?id=\d+",
    Screen.CART: r"/cart\.html",
    Screen.CHECKOUT_INFO: r"/checkout-step-one\.html",
    Screen.CHECKOUT_OVERVIEW: r"/checkout-step-two\.html",
    Screen.CHECKOUT_COMPLETE: r"/checkout-complete\.html",
}

_PATH_SCREENS = {
    "": Screen.LOGIN,
    "/": Screen.LOGIN,
    "/index.html": Screen.LOGIN,
    "/inventory.html": Screen.INVENTORY,
    "/inventory-item.html": Screen.PRODUCT_DETAIL,
    "/cart.html": Screen.CART,
    "/checkout-step-one.html": Screen.CHECKOUT_INFO,
    "/checkout-step-two.html": Screen.CHECKOUT_OVERVIEW,
    "/checkout-complete.html": Screen.CHECKOUT_COMPLETE,
}

PRODUCT_ACTIONS = {Action.OPEN_PRODUCT, Action.ADD_TO_CART, Action.REMOVE_FROM_CART}

# 没有顶部购物车角标的页面
SCREENS_WITHOUT_HEADER = {Screen.LOGIN}


def screen_for_url(url: str):
    """根据 URL 判断当前页面，未知页面返回 None"""
    return _PATH_SCREENS.get(urlparse(url).path)


def route_pattern(screen: Screen) -> str:
    return SCREEN_ROUTES[screen]


def matches_screen(url: str, screen: Screen) -> bool:
    return re.search(SCREEN_ROUTES[screen], url) is not None


def next_screen(screen: Screen, action: Action) -> Screen:
    try:
        return TRANSITIONS[(screen, action)]
    except KeyError:
        raise IllegalTransition(screen, action) from None


def reachable_screens(start: Screen = Screen.LOGIN) -> set:
    """从 start 出发沿转移表能到达的所有页面"""
    seen = {start}
    stack = [start]
    while stack:
        current = stack.pop()
        for (screen, _), target in TRANSITIONS.items():
            if screen is current and target not in seen:
                seen.add(target)
                stack.append(target)
    return seen


class StorefrontModel:
    """站点状态的内存模型，不访问浏览器"""

    def __init__(self, screen: Screen = Screen.LOGIN, cart=()):
        self.screen = screen
        self.cart = set(cart)
        self.detail_product = None  # 当前详情页对应的商品
        self.sort_order = SortOrder.NAME_AZ
        self.history = []

    @property
    def badge_count(self) -> int:
        return len(self.cart)

    def choices(self, action: Action) -> list:
        """action 可选的参数（商品或排序方式），无参数的 action 返回 [None]"""
        if action is Action.SORT:
            return list(SortOrder)
        if action is Action.OPEN_PRODUCT:
            return list(ProductId)
        if action is Action.ADD_TO_CART:
            if self.screen is Screen.PRODUCT_DETAIL:
                return [self.detail_product] if self.detail_product not in self.cart else []
            return [pid for pid in ProductId if pid not in self.cart]
        if action is Action.REMOVE_FROM_CART:
            if self.screen is Screen.PRODUCT_DETAIL:
                return [self.detail_product] if self.detail_product in self.cart else []
            return sorted(self.cart, key=lambda pid: pid.value)
        return [None]

    def allowed_actions(self) -> list:
        return [action for (screen, action) in TRANSITIONS
                if screen is self.screen and self.choices(action)]

    def apply(self, action: Action, arg=None) -> Screen:
        target = next_screen(self.screen, action)
        if action in PRODUCT_ACTIONS or action is Action.SORT:
            if arg not in self.choices(action):
                raise ValueError(f"{self.screen.name} 页面 {action.name} 不能使用参数 {arg}")

        if action is Action.ADD_TO_CART:
            self.cart.add(arg)
        elif action is Action.REMOVE_FROM_CART:
            self.cart.discard(arg)
        elif action is Action.OPEN_PRODUCT:
            self.detail_product = arg
        elif action is Action.SORT:
            self.sort_order = arg
        elif action in (Action.FINISH, Action.LOGOUT):
            self.cart.clear()

        if target is not self.screen:
            self.sort_order = SortOrder.NAME_AZ  # 重新进入商品列表为默认排序
            if target is not Screen.PRODUCT_DETAIL:
                self.detail_product = None
        self.screen = target
        self.history.append((action, arg))
        return target

    @classmethod
    def random_walk(cls, steps: int, seed=None) -> list:
        """从登录页出发随机游走 steps 步，返回 [(action, arg), ...]；同一 seed 结果相同"""
        rng = random.Random(seed)
        model = cls()
        for _ in range(steps):
            action = rng.choice(model.allowed_actions())
            model.apply(action, rng.choice(model.choices(action)))
        return list(model.history)
