# models/product.py
from dataclasses import dataclass
# Product identity used as the cart's mapping key.
@dataclass(frozen=True, order=True)
class Product:
    sku: str
    name: str = ""
