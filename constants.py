# constants.py
SERVICE_NAME = "vegetable-app"

DEFAULT_PORT      = 3000
DEFAULT_MONGO_URL = "mongodb://vegetable-app-mongodb-svc:27017/vegetable_order_app"
DEFAULT_DB_NAME   = "vegetable_order_app"

# Request body cap (JSON and form)
DEFAULT_MAX_BODY_BYTES = 100 * 1024

DEFAULT_STATIC_DIR = "public"

# Collection names follow the document mapper's pluralised model names
ORDER_COLLECTION    = "orders"
CART_COLLECTION     = "carts"
CHECKOUT_COLLECTION = "checkouts"

ORDER_CREATED_MESSAGE    = "Order placed successfully!"
CART_CREATED_MESSAGE     = "Cart data saved successfully!"
CHECKOUT_CREATED_MESSAGE = "Checkout successful!"
