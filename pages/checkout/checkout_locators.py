class CheckoutLocators:
    # Step one: your information
    CHECKOUT_INFO = '.checkout_info'
    FIRST_NAME_FIELD = '[data-test="firstName"]'
    LAST_NAME_FIELD = '[data-test="lastName"]'
    POSTAL_CODE_FIELD = '[data-test="postalCode"]'
    CONTINUE_BUTTON = '[data-test="continue"]'
    CANCEL_BUTTON = '[data-test="cancel"]'
    ERROR_MESSAGE = '[data-test="error"]'

    # Step two: overview
    CHECKOUT_ITEMS = '.cart_item'
    CHECKOUT_ITEM_NAMES = '.inventory_item_name'
    CHECKOUT_ITEM_PRICE = '.inventory_item_price'
    SUBTOTAL = '.summary_subtotal_label'
    TAX = '.summary_tax_label'
    TOTAL = '.summary_total_label'
    PAYMENT_INFO = '[data-test="payment-info-value"]'
    SHIPPING_INFO = '[data-test="shipping-info-value"]'
    FINISH_BUTTON = '[data-test="finish"]'

    # Complete
    COMPLETE_HEADER = '.complete-header'
    COMPLETE_MESSAGE = '.complete-text'
    PONY_EXPRESS_IMAGE = '[data-test="pony-express"]'
    BACK_HOME_BUTTON = '[data-test="back-to-products"]'

    @staticmethod
    def checkout_item_by_name(item_name: str) -> str:
        return f'.cart_item:has(.inventory_item_name:has-text("{item_name}"))'
