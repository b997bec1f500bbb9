class CartLocators:
    CART_ITEMS = '.cart_item'
    CART_ITEM_NAMES = '.inventory_item_name'
    CART_ITEM_PRICE = '.inventory_item_price'
    CART_ITEM_QUANTITY = '.cart_quantity'
    CHECKOUT_BUTTON = '[data-test="checkout"]'
    CONTINUE_SHOPPING_BUTTON = '[data-test="continue-shopping"]'
    REMOVE_BUTTONS = '[data-test^="remove-"]'
    TOTAL_PRICE = '.cart_total_label'
    CART_TITLE = '.title'
    CART_DESCRIPTION = '.cart_desc_label'
    CART_QUANTITY_LABEL = '.cart_quantity_label'

    @staticmethod
    def cart_item_by_name(item_name: str) -> str:
        return f'.cart_item:has(.inventory_item_name:has-text("{item_name}"))'

    @staticmethod
    def remove_button_by_name(item_name: str) -> str:
        return f'{CartLocators.cart_item_by_name(item_name)} [data-test^="remove-"]'
