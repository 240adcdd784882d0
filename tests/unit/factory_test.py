from decimal import Decimal

import pytest

from config.pages import FIXTURE_PASSWORD
from data.factory import (Role, CheckoutKind, CheckoutInfo, ProductId, User, CATALOG, PRODUCT_TEST_IDS,
                          MISSING_FIELD_ERRORS, make_user, make_random_user, make_checkout_info,
                          make_checkout_info_missing, catalog_products, product_by_name, product_by_id,
                          make_product)
from utils.errors import UnknownRoleError


@pytest.mark.unit
class TestUserFactory:

    @pytest.mark.parametrize("role, username", [
        (Role.STANDARD, "standard_user"),
        (Role.LOCKED_OUT, "locked_out_user"),
        (Role.PROBLEM, "problem_user"),
        (Role.PERFORMANCE_GLITCH, "performance_glitch_user"),
    ])
    def test_fixed_role_accounts(self, role, username):
        assert make_user(role) == User(username=username, password=FIXTURE_PASSWORD)

    def test_role_accepts_string_value(self):
        assert make_user("locked-out") == make_user(Role.LOCKED_OUT)

    def test_same_role_same_user(self):
        assert make_user(Role.STANDARD) == make_user(Role.STANDARD)

    @pytest.mark.parametrize("role", ["admin", "", None])
    def test_unknown_role(self, role):
        with pytest.raises(UnknownRoleError) as exc_info:
            make_user(role)
        assert exc_info.value.role == role
        assert "standard" in str(exc_info.value)

    def test_unknown_role_is_value_error(self):
        with pytest.raises(ValueError):
            make_user("visitor")

    def test_random_user_reproducible_with_seed(self):
        assert make_random_user(seed=42) == make_random_user(seed=42)
        assert make_random_user(seed=42) != make_random_user(seed=43)

    def test_random_user_override(self):
        user = make_random_user(seed=1, username="test@user.com")
        assert user.username == "test@user.com"
        assert user.password == make_random_user(seed=1).password

    def test_random_user_is_not_fixture_account(self):
        user = make_random_user(seed=5)
        assert user.username not in {make_user(role).username for role in Role}


@pytest.mark.unit
class TestCheckoutInfoFactory:

    def test_valid(self):
        assert make_checkout_info() == CheckoutInfo("John", "Doe", "12345")

    def test_special(self):
        info = make_checkout_info(CheckoutKind.SPECIAL)
        assert info.first_name == "José"
        assert info.last_name == "O'Connor"

    def test_empty(self):
        assert make_checkout_info("empty") == CheckoutInfo("", "", "")

    def test_random_reproducible(self):
        first = make_checkout_info(CheckoutKind.RANDOM, seed=9)
        assert first == make_checkout_info(CheckoutKind.RANDOM, seed=9)
        assert all([first.first_name, first.last_name, first.postal_code])

    def test_override(self):
        info = make_checkout_info(postal_code="")
        assert info == CheckoutInfo("John", "Doe", "")

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            make_checkout_info("partial")

    @pytest.mark.parametrize("field", list(MISSING_FIELD_ERRORS))
    def test_missing_exactly_one_field(self, field):
        info, error_msg = make_checkout_info_missing(field)
        assert getattr(info, field) == ""
        blanks = [name for name in ("first_name", "last_name", "postal_code") if getattr(info, name) == ""]
        assert blanks == [field]
        assert error_msg.endswith("is required")

    def test_missing_unknown_field(self):
        with pytest.raises(ValueError):
            make_checkout_info_missing("email")


@pytest.mark.unit
class TestCatalog:

    def test_catalog_has_six_unique_products(self):
        products = catalog_products()
        assert len(products) == 6
        assert len({p.name for p in products}) == 6
        assert {p.id for p in products} == set(ProductId)

    def test_catalog_prices_are_money(self):
        for product in CATALOG:
            assert product.price.startswith("$")
            assert product.price_value > 0
            assert product.price_value == product.price_value.quantize(Decimal("0.01"))

    def test_test_ids_built_from_catalog(self):
        assert PRODUCT_TEST_IDS[ProductId.BACKPACK] == "sauce-labs-backpack"
        assert PRODUCT_TEST_IDS[ProductId.TEST_TSHIRT] == "test.allthethings()-t-shirt-(red)"
        assert len(set(PRODUCT_TEST_IDS.values())) == len(ProductId)

    def test_product_lookup(self):
        backpack = product_by_name("Sauce Labs Backpack")
        assert backpack is product_by_id(ProductId.BACKPACK)
        assert backpack.info() == {"name": "Sauce Labs Backpack", "price": "$29.99",
                                   "description": backpack.description}
        assert product_by_id(4) is backpack
        assert product_by_name("Sauce Labs Umbrella") is None

    def test_random_product_not_in_catalog(self):
        product = make_product(seed=3)
        assert product == make_product(seed=3)
        assert product.id is None
        assert product.price.startswith("$")
        assert product_by_name(product.name) is None
