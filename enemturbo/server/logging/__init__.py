from .purchase_payloads import mask_email, purchase_to_loggable

__all__ = ["mask_email", "purchase_to_loggable"]
