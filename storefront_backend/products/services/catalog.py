# products/services/catalog.py

"""
SELLER CATALOG SERVICE

save_product(...) handles both "add" and "edit":

FLOW:
1) Resolve the seller's store (and the product, when editing)
2) Validate EVERYTHING before touching storage:
   - name / description non-empty, price a non-negative decimal that fits
     the price column (at most 99999999.99)
   - add: store below MAX_PRODUCTS_PER_STORE, at least one image
   - retained + new images <= MAX_IMAGES_PER_PRODUCT, supported file types
     (an overflow raises ImageLimitError before any upload; it is not truncated)
3) Upload new files, collecting public URLs
4) images = retained + new, sliced to MAX_IMAGES_PER_PRODUCT, single atomic
   insert / update
5) Write failed -> delete the files uploaded in step 3, raise BackendWriteError
6) Edit succeeded -> best-effort delete of images the edit dropped
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from django.db import DatabaseError, transaction

from products.models import MAX_IMAGES_PER_PRODUCT, MAX_PRODUCTS_PER_STORE, Product
from products.services.media import delete_images, is_allowed_image, upload_product_image
from store.models import Store
from store.services.exceptions import (
    BackendWriteError,
    ImageLimitError,
    InputValidationError,
    ProductLimitError,
    ProductNotFoundError,
    StoreNotFoundError,
)
from store.services.onboarding import seller_store

logger = logging.getLogger(__name__)

PRODUCT_LIMIT_MESSAGE = f"You can list up to {MAX_PRODUCTS_PER_STORE} products"
IMAGE_LIMIT_MESSAGE = f"A product can have at most {MAX_IMAGES_PER_PRODUCT} images"

# Product.price is DecimalField(max_digits=10, decimal_places=2)
PRICE_QUANTUM = Decimal("0.01")
MAX_PRICE = Decimal("99999999.99")


# ============================================================
# LOOKUPS
# ============================================================

def store_for_seller(user) -> Store:
    store = seller_store(user)
    if store is None:
        raise StoreNotFoundError("Store not found")
    return store


def get_seller_product(*, store: Store, product_id) -> Product:
    product = Product.objects.filter(pk=product_id, store=store).first()
    if product is None:
        raise ProductNotFoundError("Product not found")
    return product


# ============================================================
# VALIDATION
# ============================================================

def parse_price(value) -> Optional[Decimal]:
    """
    '12.50' -> Decimal('12.50').

    None for anything that is not a non-negative number that fits the
    price column (8 integer digits, 2 decimal places).
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        price = Decimal(str(value).strip())
        if not price.is_finite() or price < 0:
            return None
        price = price.quantize(PRICE_QUANTUM)
    except (InvalidOperation, ValueError):
        return None
    if price > MAX_PRICE:
        return None
    return price


def validate_product_fields(*, name, description, price) -> dict:
    errors = {}

    name = (name or "").strip()
    description = (description or "").strip()
    parsed_price = parse_price(price)

    if not name:
        errors["name"] = "Product name is required"
    if not description:
        errors["description"] = "Description is required"
    if parsed_price is None:
        errors["price"] = "Please enter a valid price"

    if errors:
        raise InputValidationError(errors)

    return {"name": name, "description": description, "price": parsed_price}


def _retained(product: Optional[Product], retained_images) -> list[str]:
    if product is None:
        return []
    current = list(product.images or [])
    if retained_images is None:
        return current
    keep = set(retained_images)
    return [url for url in current if url in keep]


# ============================================================
# WRITE
# ============================================================

def save_product(
    *,
    user,
    product_id=None,
    name,
    description,
    price,
    retained_images: Optional[Iterable[str]] = None,
    new_images: Iterable = (),
) -> Product:
    store = store_for_seller(user)
    product = get_seller_product(store=store, product_id=product_id) if product_id else None
    new_images = list(new_images or [])

    if product is None and store.products.count() >= MAX_PRODUCTS_PER_STORE:
        raise ProductLimitError({"products": PRODUCT_LIMIT_MESSAGE})

    cleaned = validate_product_fields(name=name, description=description, price=price)

    retained = _retained(product, retained_images)

    if product is None and not new_images:
        raise InputValidationError({"images": "Please add at least one image"})

    if len(retained) + len(new_images) > MAX_IMAGES_PER_PRODUCT:
        raise ImageLimitError({"images": IMAGE_LIMIT_MESSAGE})

    if any(not is_allowed_image(upload) for upload in new_images):
        raise InputValidationError({"images": "Images must be JPG, PNG, GIF or WEBP files"})

    # ---------------- upload ----------------
    uploaded: list[str] = []
    try:
        for upload in new_images:
            uploaded.append(upload_product_image(seller_id=user.id, upload=upload))
    except OSError as exc:
        delete_images(uploaded)
        raise BackendWriteError(str(exc)) from exc

    images = (retained + uploaded)[:MAX_IMAGES_PER_PRODUCT]
    previous = list(product.images or []) if product else []

    # ---------------- write ----------------
    try:
        with transaction.atomic():
            if product is None:
                locked = Store.objects.select_for_update().get(pk=store.pk)
                if locked.products.count() >= MAX_PRODUCTS_PER_STORE:
                    raise ProductLimitError({"products": PRODUCT_LIMIT_MESSAGE})
                product = Product.objects.create(store=locked, images=images, **cleaned)
            else:
                for field, value in cleaned.items():
                    setattr(product, field, value)
                product.images = images
                product.save()
    except ProductLimitError:
        delete_images(uploaded)
        raise
    except DatabaseError as exc:
        delete_images(uploaded)
        logger.error(
            "Product write failed",
            extra={"store_id": str(store.id), "error": str(exc)},
        )
        raise BackendWriteError(str(exc)) from exc

    dropped = [url for url in previous if url not in images]
    if dropped:
        delete_images(dropped)

    logger.info(
        "Product saved",
        extra={
            "store_id": str(store.id),
            "product_id": str(product.id),
            "images": len(images),
            "is_new": product_id is None,
        },
    )
    return product


def delete_product(*, user, product_id) -> None:
    store = store_for_seller(user)
    product = get_seller_product(store=store, product_id=product_id)
    images = list(product.images or [])

    try:
        product.delete()
    except DatabaseError as exc:
        raise BackendWriteError(str(exc)) from exc

    delete_images(images)
    logger.info("Product deleted", extra={"store_id": str(store.id), "product_id": str(product_id)})
