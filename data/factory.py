"""测试数据工厂

- 固定数据（fixture 账号、固定收货人、商品目录）每次调用返回相同的值
- 随机数据基于 Faker，传入 seed 时可复现
所有函数都没有副作用，不访问浏览器
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Optional

from faker import Faker

from config.pages import FIXTURE_PASSWORD
from utils.common_utils import format_money
from utils.errors import UnknownRoleError


# ================== 数据模型 ==================
@dataclass(frozen=True)
class User:
    username: str
    password: str


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


class ProductId(Enum):
    """枚举值 = 站点商品 id（/inventory-item.html?id=<n>）"""
    BACKPACK = 4
    BIKE_LIGHT = 0
    BOLT_TSHIRT = 1
    FLEECE_JACKET = 5
    ONESIE = 2
    TEST_TSHIRT = 3


@dataclass(frozen=True)
class Product:
    name: str
    price: str
    description: str
    id: Optional[ProductId] = None
    slug: str = ""  # 站点 test id 后缀，例如 add-to-cart-{slug}

    @property
    def price_value(self) -> Decimal:
        return Decimal(self.price.replace("$", ""))

    def info(self) -> dict:
        """页面展示的三个字段，用于与页面抓取结果比对"""
        return {"name": self.name, "price": self.price, "description": self.description}


class Role(Enum):
    STANDARD = "standard"
    LOCKED_OUT = "locked-out"
    PROBLEM = "problem"
    PERFORMANCE_GLITCH = "performance-glitch"


class CheckoutKind(Enum):
    VALID = "valid"
    RANDOM = "random"
    SPECIAL = "special"
    EMPTY = "empty"


# ================== 固定数据 ==================
ROLE_USERNAMES = {
    Role.STANDARD: "standard_user",
    Role.LOCKED_OUT: "locked_out_user",
    Role.PROBLEM: "problem_user",
    Role.PERFORMANCE_GLITCH: "performance_glitch_user",
}

CATALOG = (
    Product(
        id=ProductId.BACKPACK,
        slug="sauce-labs-backpack",
        name="Sauce Labs Backpack",
        price="$29.99",
        description="carry.allTheThings() with the sleek, streamlined Sly Pack that melds uncompromising style "
                    "with unequaled laptop and tablet protection.",
    ),
    Product(
        id=ProductId.BIKE_LIGHT,
        slug="sauce-labs-bike-light",
        name="Sauce Labs Bike Light",
        price="$9.99",
        description="A red light isn't the desired state in testing but it sure helps when riding your bike at "
                    "night. Water-resistant with 3 lighting modes, 1 AAA battery included.",
    ),
    Product(
        id=ProductId.BOLT_TSHIRT,
        slug="sauce-labs-bolt-t-shirt",
        name="Sauce Labs Bolt T-Shirt",
        price="$15.99",
        description="Get your testing superhero on with the Sauce Labs bolt T-shirt. From American Apparel, "
                    "100% ringspun combed cotton, heather gray with red bolt.",
    ),
    Product(
        id=ProductId.FLEECE_JACKET,
        slug="sauce-labs-fleece-jacket",
        name="Sauce Labs Fleece Jacket",
        price="$49.99",
        description="It's not every day that you come across a midweight quarter-zip fleece jacket capable of "
                    "handling everything from a relaxing day outdoors to a busy day at the office.",
    ),
    Product(
        id=ProductId.ONESIE,
        slug="sauce-labs-onesie",
        name="Sauce Labs Onesie",
        price="$7.99",
        description="Rib snap infant onesie for the junior automation engineer in development. Reinforced 3-snap "
                    "bottom closure, two-needle hemmed sleeved and bottom won't unravel.",
    ),
    Product(
        id=ProductId.TEST_TSHIRT,
        slug="test.allthethings()-t-shirt-(red)",
        name="Test.allTheThings() T-Shirt (Red)",
        price="$15.99",
        description="This classic Sauce Labs t-shirt is perfect to wear when cozying up to your keyboard to "
                    "automate a few tests. Super-soft and comfy ringspun combed cotton.",
    ),
)

# ProductId -> test id 后缀，只从商品目录生成一次
PRODUCT_TEST_IDS = {p.id: p.slug for p in CATALOG}

VALID_CHECKOUT_INFO = CheckoutInfo(first_name="John", last_name="Doe", postal_code="12345")
SPECIAL_CHECKOUT_INFO = CheckoutInfo(first_name="José", last_name="O'Connor", postal_code="A1B-2C3")
EMPTY_CHECKOUT_INFO = CheckoutInfo(first_name="", last_name="", postal_code="")

# 缺失字段 -> 站点错误提示
MISSING_FIELD_ERRORS = {
    "first_name": "First Name is required",
    "last_name": "Last Name is required",
    "postal_code": "Postal Code is required",
}


def _faker(seed=None) -> Faker:
    # 每次调用独立的 Faker 实例，seed 不影响全局随机状态
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return fake


# ================== 用户 ==================
def make_user(role) -> User:
    """固定角色账号；role 可以是 Role 或其字符串值"""
    try:
        role = Role(role)
    except ValueError:
        raise UnknownRoleError(role, [r.value for r in Role]) from None
    return User(username=ROLE_USERNAMES[role], password=FIXTURE_PASSWORD)


def make_random_user(seed=None, **overrides) -> User:
    """随机账号，任意字段可覆盖：make_random_user(username="test@user.com")"""
    fake = _faker(seed)
    user = User(username=fake.user_name(), password=fake.password())
    return replace(user, **overrides)


# ================== 收货人信息 ==================
def make_checkout_info(kind=CheckoutKind.VALID, seed=None, **overrides) -> CheckoutInfo:
    kind = CheckoutKind(kind)
    if kind is CheckoutKind.VALID:
        info = VALID_CHECKOUT_INFO
    elif kind is CheckoutKind.SPECIAL:
        info = SPECIAL_CHECKOUT_INFO
    elif kind is CheckoutKind.EMPTY:
        info = EMPTY_CHECKOUT_INFO
    else:
        fake = _faker(seed)
        info = CheckoutInfo(first_name=fake.first_name(), last_name=fake.last_name(),
                            postal_code=fake.postcode())
    return replace(info, **overrides)


def make_checkout_info_missing(field: str) -> tuple:
    """只缺一个必填字段的收货人信息，返回 (CheckoutInfo, 期望错误提示)"""
    if field not in MISSING_FIELD_ERRORS:
        raise ValueError(f"未知字段：{field}")
    return replace(VALID_CHECKOUT_INFO, **{field: ""}), MISSING_FIELD_ERRORS[field]


# ================== 商品 ==================
def catalog_products() -> list:
    return list(CATALOG)


def product_by_name(name: str) -> Optional[Product]:
    return next((p for p in CATALOG if p.name == name), None)


def product_by_id(product_id: ProductId) -> Product:
    return next(p for p in CATALOG if p.id is ProductId(product_id))


def make_product(seed=None, **overrides) -> Product:
    """目录外的随机商品，用于反向查找等场景"""
    fake = _faker(seed)
    price = fake.pydecimal(left_digits=2, right_digits=2, positive=True, min_value=1, max_value=99)
    product = Product(name=f"{fake.color_name()} {fake.word().title()}",
                      price=format_money(price),
                      description=fake.sentence(nb_words=12))
    return replace(product, **overrides)
