# models/errors.py


class InvalidArgumentError(ValueError):
    # Raised when a cart operation receives a missing or non-positive argument.
    # The cart is left untouched when this is raised.
    pass
