from assertions.base_assert import check


class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        check(actual == expect, f"购物车角标显示的加购商品数量错误：实际{actual}!=期望{expect}")

    @staticmethod
    def item_count(actual: int, expect: int):
        """购物车页面商品行数"""
        check(actual == expect, f"购物车页面商品数量不符合预期：实际{actual}!=期望{expect}")

    @staticmethod
    def added_product_count(added_products: list, cart_products: list):
        """加购商品=购物车页商品？"""
        check(len(added_products) == len(cart_products),
              f"已加购商品数量{len(added_products)} !=购物车页面商品数量 {len(cart_products)}")

    @staticmethod
    def product_detail_info(added_products: list, cart_products: list):
        """加购商品与购物车页商品一致性对比"""
        for added in added_products:
            check(added in cart_products, f"inventory加购的商品{added}，在购物车页面不存在")

        for cart in cart_products:
            check(cart in added_products, f"购物车页面的商品{cart}，不在inventory加购商品列表中")
