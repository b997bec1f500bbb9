from pages.common.header_locators import HeaderLocators


class ProductLocators:
    DETAILS_CONTAINER = '.inventory_details_desc_container'
    PRODUCT_NAME = '.inventory_details_name'
    PRODUCT_PRICE = '.inventory_details_price'
    PRODUCT_DESCRIPTION = '.inventory_details_desc'
    PRODUCT_IMAGE = '.inventory_details_img'

    # The details page has a single action button, so scope it to the details container
    ADD_TO_CART_BUTTON = '.inventory_details_desc_container [data-test^="add-to-cart"]'
    REMOVE_FROM_CART_BUTTON = '.inventory_details_desc_container [data-test^="remove"]'
    BACK_TO_PRODUCTS_BUTTON = '[data-test="back-to-products"]'

    CART_BADGE = HeaderLocators.CART_BADGE
    CART_ICON = HeaderLocators.CART_ICON
    MENU_BUTTON = HeaderLocators.MENU_BUTTON
    CLOSE_MENU_BUTTON = HeaderLocators.CLOSE_MENU_BUTTON
    LOGOUT_LINK = HeaderLocators.LOGOUT_LINK
    RESET_APP_STATE_LINK = HeaderLocators.RESET_APP_STATE_LINK

    @staticmethod
    def slug(product_name: str) -> str:
        return '-'.join(product_name.lower().split())

    @staticmethod
    def add_to_cart_button_by_name(product_name: str) -> str:
        return f'[data-test="add-to-cart-{ProductLocators.slug(product_name)}"]'

    @staticmethod
    def remove_from_cart_button_by_name(product_name: str) -> str:
        return f'[data-test="remove-{ProductLocators.slug(product_name)}"]'
