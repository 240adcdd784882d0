"""页面元素 test-id（站点使用 data-test 属性，conftest 中统一注册为 test id 属性）"""

LOGIN_LOCATORS = {
    "username_input": "username",  # 用户名
    "password_input": "password",  # 用户密码
    "login_button": "login-button",  # 登录按钮
    "error_msg": "error",  # 登录错误提示信息
}

HEADER_LOCATORS = {
    "shopping_cart_link": "shopping-cart-link",  # 登录成功页面购物车icon
    "shopping_cart_badge": "shopping-cart-badge",  # 购物车显示商品数量
    "title": "title",  # 页面标题 Products / Your Cart / Checkout: ...
    "menu_open": "Open Menu",  # 菜单按钮（按 role name 定位）
    "menu_close": "Close Menu",
    "all_items_link": "inventory-sidebar-link",
    "about_link": "about-sidebar-link",
    "logout_link": "logout-sidebar-link",
    "reset_link": "reset-sidebar-link",
}

INVENTORY_LOCATORS = {
    "item_product": "inventory-item",  # 商品列表
    "item_product_name": "inventory-item-name",  # 单商品名称
    "item_product_price": "inventory-item-price",  # 单商品价格
    "item_product_desc": "inventory-item-desc",  # 单商品描述
    "product_sort_type": "product-sort-container",  # 商品排序方式
    "add_to_cart": "add-to-cart-{slug}",  # 商品添加按钮
    "remove": "remove-{slug}",  # 已添加商品按钮文字变为“Remove”
    "item_title_link": "item-{id}-title-link",  # 商品名称链接，进入详情页
}

PRODUCT_LOCATORS = {
    "name": "inventory-item-name",
    "price": "inventory-item-price",
    "desc": "inventory-item-desc",
    "add_to_cart": "add-to-cart",
    "remove": "remove",
    "back_to_products": "back-to-products",
}

CART_LOCATORS = {
    "cart_item": "inventory-item",  # 购物车商品行
    "item_product_name": "inventory-item-name",
    "item_product_price": "inventory-item-price",
    "item_product_desc": "inventory-item-desc",
    "continue": "continue-shopping",  # 继续购物按钮
    "checkout_button": "checkout",  # 结算按钮
    "remove": "remove-{slug}",
}

CHECKOUT_LOCATORS = {
    # 收货人信息
    "firstName_input": "firstName",  # firstName输入框
    "lastName_input": "lastName",  # lastName输入框
    "postalCode_input": "postalCode",  # postalCode输入框
    "container_error_msg": "error",  # 未填写收货人信息提交错误提示msg Error: First Name is required
    "step_one_cancel_button": "cancel",  # 取消按钮
    "continue_button": "continue",  # 继续按钮

    # --------checkout_step_two.html---------
    # 商品信息
    "item_list": "inventory-item",  # 订单确认页面商品列表
    "item_product_name": "inventory-item-name",  # 单商品名称
    "item_product_price": "inventory-item-price",  # 单商品价格
    "item_product_desc": "inventory-item-desc",  # 单商品描述
    # 订单价格
    "payment_information": "payment-info-value",  # 支付信息value
    "shipping_information": "shipping-info-value",  # 运费信息value
    "products_price": "subtotal-label",  # 商品价格
    "tax_price": "tax-label",  # 税费
    "order_price": "total-label",  # 订单价格
    # 操作步骤
    "step_two_cancel_button": "cancel",  # 取消按钮
    "finish_button": "finish",  # 完成按钮

    # --------checkout-complete.html---------
    "finish_page_message": "complete-header",  # 完成页面提示信息
    "finish_page_text": "complete-text",
    "pony_express": "pony-express",
    "back_to_products": "back-to-products",
}
