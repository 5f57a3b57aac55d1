"""
Domain errors raised by the services and mapped to HTTP statuses in routes.
"""


class NotFoundError(LookupError):
    """A product, quiz, question, answer or cart line the shopper asked for does not exist."""
