# store/signals.py

"""
STOREFRONT SIGNALS

storefront_viewed(sender=Store, store=<Store>)
- sent with send_robust() after a public storefront payload is built
- receivers must never be able to change what the visitor sees
"""

from django.dispatch import Signal, receiver

storefront_viewed = Signal()


@receiver(storefront_viewed, dispatch_uid="store.record_storefront_visit")
def record_storefront_visit(sender, store, **kwargs):
    from store.services.visits import record_visit

    record_visit(store)
