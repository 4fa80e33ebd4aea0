"""Pricing exceptions"""


class PricingError(Exception):
    """Base class for errors raised by the pricing engine.

    Malformed cart input never raises; only integration problems do.
    """


class DeliveryConfigurationError(PricingError):
    """The delivery-method table is missing, empty or malformed.

    This means the caller is mis-wired, so the engine refuses to produce a
    breakdown instead of silently pricing the order at $0.
    """
