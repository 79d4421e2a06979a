"""CSS selectors of the Swag Labs application."""

# login page
USERNAME_INPUT = "#user-name"
PASSWORD_INPUT = "#password"
LOGIN_BUTTON = "#login-button"
ERROR_BANNER = '[data-test="error"]'

# inventory page
INVENTORY_ITEM = ".inventory_item"
INVENTORY_ITEM_NAME = ".inventory_item_name"
INVENTORY_ITEM_PRICE = ".inventory_item_price"
PRODUCT_LABEL = ".product_label"
SORT_CONTAINER = ".product_sort_container"
ADD_TO_CART_BUTTON = ".btn_primary.btn_inventory"

# cart
CART_BADGE = ".shopping_cart_badge"
CART_LINK = ".shopping_cart_link"
CHECKOUT_BUTTON = "a.btn_action.checkout_button"

# checkout
FIRST_NAME_INPUT = '[data-test="firstName"]'
LAST_NAME_INPUT = '[data-test="lastName"]'
POSTAL_CODE_INPUT = '[data-test="postalCode"]'
CONTINUE_BUTTON = "input.btn_primary.cart_button"
FINISH_BUTTON = "a.btn_action.cart_button"
COMPLETE_HEADER = ".complete-header"
