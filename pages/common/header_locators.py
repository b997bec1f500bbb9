class HeaderLocators:
    CART_ICON = '.shopping_cart_link'
    CART_BADGE = '.shopping_cart_badge'
    MENU_BUTTON = '#react-burger-menu-btn'
    CLOSE_MENU_BUTTON = '#react-burger-cross-btn'
    ALL_ITEMS_LINK = '#inventory_sidebar_link'
    LOGOUT_LINK = '#logout_sidebar_link'
    RESET_APP_STATE_LINK = '#reset_sidebar_link'
