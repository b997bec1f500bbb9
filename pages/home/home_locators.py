from pages.common.header_locators import HeaderLocators


class HomeLocators:
    PRODUCT_SORT = '.product_sort_container'
    ADD_TO_CART_BUTTON = '[data-test="add-to-cart-sauce-labs-backpack"]'
    REMOVE_FROM_CART_BUTTON = '[data-test="remove-sauce-labs-backpack"]'
    ADD_BIKE_LIGHT_BUTTON = '[data-test="add-to-cart-sauce-labs-bike-light"]'
    ADD_TO_CART_BUTTONS = '[data-test^="add-to-cart-"]'
    REMOVE_FROM_CART_BUTTONS = '[data-test^="remove-"]'
    CART_ICON = HeaderLocators.CART_ICON
    CART_BADGE = HeaderLocators.CART_BADGE
    INVENTORY_CONTAINER = '.inventory_list'
    PRODUCT_ITEMS = '.inventory_item'
    PRODUCT_NAME = '.inventory_item_name'
    PRODUCT_PRICE = '.inventory_item_price'
    PRODUCT_DESCRIPTION = '.inventory_item_desc'
    PRODUCT_IMAGE = '.inventory_item_img img'
    MENU_BUTTON = HeaderLocators.MENU_BUTTON
    CLOSE_MENU_BUTTON = HeaderLocators.CLOSE_MENU_BUTTON
    LOGOUT_LINK = HeaderLocators.LOGOUT_LINK
    RESET_APP_STATE_LINK = HeaderLocators.RESET_APP_STATE_LINK

    @staticmethod
    def product_item_by_name(product_name: str) -> str:
        return f'.inventory_item:has(.inventory_item_name:has-text("{product_name}"))'

    @staticmethod
    def add_to_cart_button_by_name(product_name: str) -> str:
        return f'{HomeLocators.product_item_by_name(product_name)} [data-test^="add-to-cart-"]'

    @staticmethod
    def remove_from_cart_button_by_name(product_name: str) -> str:
        return f'{HomeLocators.product_item_by_name(product_name)} [data-test^="remove-"]'

    @staticmethod
    def product_name_link_by_name(product_name: str) -> str:
        return f'.inventory_item_name:text-is("{product_name}")'

    @staticmethod
    def product_image_by_name(product_name: str) -> str:
        return f'{HomeLocators.product_item_by_name(product_name)} {HomeLocators.PRODUCT_IMAGE}'
