"""
PATH: products/models/__init__.py

Products models export surface.
"""

from .product import MAX_IMAGES_PER_PRODUCT, MAX_PRODUCTS_PER_STORE, Product

__all__ = [
    "Product",
    "MAX_PRODUCTS_PER_STORE",
    "MAX_IMAGES_PER_PRODUCT",
]
