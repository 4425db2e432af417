# backend/pricing.py
from decimal import Decimal

# Fixed per-order charge on top of the item total, shared by the cart and order validation
HANDLING_FEE = Decimal("2")
# Delivery is always free
DELIVERY_FEE = Decimal("0")
