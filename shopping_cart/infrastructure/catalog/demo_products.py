"""Demo catalog data."""
from shopping_cart.domain.entities import Product

DEMO_PRODUCTS: tuple[Product, ...] = (
    Product("P001", "Laptop", 1200),
    Product("P002", "Mouse", 25.5),
    Product("P003", "Keyboard", 70),
    Product("P004", "Headset", 89.9),
    Product("P005", 'Monitor 27"', 279.99),
)
