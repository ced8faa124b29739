"""Adapter layer errors."""


class AdapterError(Exception):
    """Base error for identity provider integrations."""


class WebhookVerificationError(AdapterError):
    """A delivery's signature, timestamp or payload was rejected."""


class WebhookSecretError(AdapterError):
    """The webhook signing secret is missing or malformed.

    This is a deployment problem rather than a bad delivery.
    """
