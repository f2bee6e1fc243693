"""Database schema and table constants."""

STOREFRONT_SCHEMA = "storefront"

USERS_TABLE = "users"
ADDRESSES_TABLE = "addresses"
BRANDS_TABLE = "brands"
PRODUCTS_TABLE = "products"
PRODUCT_TAGS_TABLE = "product_tags"
PRODUCT_IMAGES_TABLE = "product_images"
PRODUCT_REVIEWS_TABLE = "product_reviews"
