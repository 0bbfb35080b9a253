# models/cart.py
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import MAX_PREC, Decimal, InvalidOperation, localcontext

from models.errors import InvalidArgumentError
from models.product import Product
from utils.logger import get_logger

logger = get_logger("cart")

ZERO = Decimal("0")


def to_price(value) -> Decimal:
    # Decimal, int, str or float -> Decimal. Floats go through str() so 1.5 stays 1.5.
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Unit price must be a number, got {value!r}")
    if isinstance(value, Decimal):
        price = value
    else:
        try:
            price = Decimal(str(value))
        except InvalidOperation:
            raise InvalidArgumentError(f"Unit price is not a valid amount: {value!r}") from None
    if not price.is_finite():
        raise InvalidArgumentError(f"Unit price must be finite, got {value!r}")
    return price


# One line in the cart: a product, its unit price and how many units.
@dataclass(frozen=True)
class CartItem:
    product: Product
    unit_price: Decimal
    quantity: int

    def __post_init__(self):
        if self.quantity <= 0 or self.unit_price <= 0:
            raise InvalidArgumentError("Quantity and unit price must be positive.")

    @property
    def line_total(self) -> Decimal:
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            return self.unit_price * self.quantity


class Cart:
    """
    Shopping cart for a single session.

    Holds at most one CartItem per product, in the order products were
    first added. Adding a product that is already in the cart sums the
    quantities and takes the newly supplied unit price. Items can be
    removed by product or by their position in insertion order.
    """

    def __init__(self):
        self._items: dict[Product, CartItem] = {}

    def add_item(self, product: Product, unit_price, quantity: int) -> None:
        price = self._validate(product, unit_price, quantity)

        existing = self._items.get(product)
        if existing is None:
            self._items[product] = CartItem(product, price, quantity)
            logger.debug("Added %s: %d x %s", product, quantity, price)
        else:
            # Reassigning an existing key keeps its insertion slot.
            self._items[product] = replace(
                existing, unit_price=price, quantity=existing.quantity + quantity
            )
            logger.debug(
                "Merged %s: quantity %d -> %d, unit price %s -> %s",
                product, existing.quantity, existing.quantity + quantity,
                existing.unit_price, price,
            )

    def _validate(self, product, unit_price, quantity) -> Decimal:
        if product is None or unit_price is None or quantity is None:
            logger.warning("Rejected add_item with missing argument")
            raise InvalidArgumentError("Product, unit price and quantity must not be None.")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            logger.warning("Rejected add_item with non-integer quantity %r", quantity)
            raise InvalidArgumentError(f"Quantity must be an integer, got {quantity!r}")
        try:
            price = to_price(unit_price)
        except InvalidArgumentError:
            logger.warning("Rejected add_item with unit price %r", unit_price)
            raise
        if quantity <= 0 or price <= 0:
            logger.warning("Rejected add_item for %s: quantity=%r unit_price=%s",
                           product, quantity, price)
            raise InvalidArgumentError("Quantity and unit price must be positive.")
        return price

    def remove_item(self, product: Product | int) -> bool:
        # An int is taken as a position, anything else as a product.
        if isinstance(product, int) and not isinstance(product, bool):
            return self.remove_item_at(product)
        removed = self._items.pop(product, None) is not None
        if removed:
            logger.debug("Removed %s", product)
        return removed

    def remove_item_at(self, position: int) -> bool:
        # Positions refer to the current insertion order, not a stable id.
        if isinstance(position, bool):
            return False
        if position < 0 or position >= len(self._items):
            return False
        product = list(self._items)[position]
        del self._items[product]
        logger.debug("Removed %s at position %d", product, position)
        return True

    def get_total_value(self) -> Decimal:
        # Full precision so large totals never round.
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            return sum((item.line_total for item in self._items.values()), ZERO)

    def get_items(self) -> list[CartItem]:
        return list(self._items.values())

    def get_item(self, product: Product) -> CartItem | None:
        return self._items.get(product)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self):
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, product) -> bool:
        return product in self._items

    def __iter__(self):
        return iter(self.get_items())
