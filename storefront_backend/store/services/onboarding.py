# store/services/onboarding.py

"""
SELLER ONBOARDING

create_store(user, store_name, contact_phone, terms_accepted)

FLOW:
1) Caller must not own a store yet (StoreAlreadyExistsError otherwise)
2) Validate input (nothing is written on failure)
3) Slug must be free (validation error on store_name otherwise)
4) Single atomic insert
"""

from __future__ import annotations

import logging
from typing import Optional

from django.db import DatabaseError, IntegrityError, transaction

from store.models import Store
from store.services.exceptions import (
    BackendWriteError,
    InputValidationError,
    StoreAlreadyExistsError,
)
from store.services.slugs import has_reserved_characters, slugify_store_name
from users.services.phone import digits_only, is_valid_phone

logger = logging.getLogger(__name__)

MIN_STORE_NAME_LENGTH = 3
MAX_STORE_NAME_LENGTH = 120

STORE_NAME_TAKEN = "This store name is already taken. Please choose another."


def seller_store(user) -> Optional[Store]:
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    return Store.objects.filter(seller=user).first()


def validate_store_details(*, store_name, contact_phone, terms_accepted) -> dict:
    errors = {}

    name = (store_name or "").strip()
    if len(name) < MIN_STORE_NAME_LENGTH:
        errors["store_name"] = "Store name must be at least 3 characters"
    elif len(name) > MAX_STORE_NAME_LENGTH:
        errors["store_name"] = "Store name is too long"
    elif has_reserved_characters(name):
        errors["store_name"] = "Store name cannot contain / ? or #"
    elif not slugify_store_name(name):
        errors["store_name"] = "Store name must contain letters or numbers"

    if not is_valid_phone(contact_phone):
        errors["contact_phone"] = "Please enter a valid phone number"

    if terms_accepted is not True:
        errors["terms_accepted"] = "Please accept the terms and conditions"

    if errors:
        raise InputValidationError(errors)

    return {"store_name": name, "contact_phone": digits_only(contact_phone)}


def create_store(*, user, store_name, contact_phone, terms_accepted) -> Store:
    if seller_store(user) is not None:
        raise StoreAlreadyExistsError("You already have a store")

    cleaned = validate_store_details(
        store_name=store_name,
        contact_phone=contact_phone,
        terms_accepted=terms_accepted,
    )

    slug = slugify_store_name(cleaned["store_name"])
    if Store.objects.filter(slug=slug).exists():
        raise InputValidationError({"store_name": STORE_NAME_TAKEN})

    try:
        with transaction.atomic():
            store = Store.objects.create(seller=user, **cleaned)
    except IntegrityError as exc:
        # Lost a race: either this seller or this slug was taken meanwhile.
        if seller_store(user) is not None:
            raise StoreAlreadyExistsError("You already have a store") from exc
        raise InputValidationError({"store_name": STORE_NAME_TAKEN}) from exc
    except DatabaseError as exc:
        raise BackendWriteError(str(exc)) from exc

    logger.info(
        "Store created",
        extra={"store_id": str(store.id), "slug": store.slug, "seller_id": str(user.id)},
    )
    return store
