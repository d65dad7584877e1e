"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services own the rules that span several aggregates: the vote ledger and
    cached trust scores, comment threading, ranking and moderation. They are
    built per request by the DI container and hold no state of their own
    beyond their collaborators and settings.
    """
