import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from database import SessionLocal, init_db
from models.product import Product

logger = logging.getLogger(__name__)

# name, category, price, image, stock, description
SEED_PRODUCTS = [
    ("Amul Gold Milk", "Dairy", "33", "https://picsum.photos/seed/milk/400/400", 100, "Fresh full cream milk"),
    ("Harvest Gold Bread", "Bakery", "45", "https://picsum.photos/seed/bread/400/400", 50, "Whole wheat brown bread"),
    ("Lays Classic Salted", "Snacks", "20", "https://picsum.photos/seed/chips/400/400", 200, "Crispy potato chips"),
    ("Coca Cola 1.25L", "Beverages", "65", "https://picsum.photos/seed/coke/400/400", 80, "Refreshing soft drink"),
    ("Aashirvaad Atta 5kg", "Atta, Rice & Dal", "245", "https://picsum.photos/seed/atta/400/400", 40, "Premium chakki atta"),
    ("Maggi Noodles 280g", "Instant Food", "48", "https://picsum.photos/seed/maggi/400/400", 150, "2-minute masala noodles"),
    ("Surf Excel Matic", "Cleaning", "199", "https://picsum.photos/seed/surf/400/400", 30, "Top load detergent"),
    ("Dettol Handwash", "Personal Care", "99", "https://picsum.photos/seed/dettol/400/400", 60, "Germ protection liquid"),
]


def seed_products(db: Session) -> int:
    """Insert the starter catalog when the products table is empty. Returns the number of rows added."""
    if db.query(Product).count() > 0:
        return 0

    for name, category, price, image, stock, description in SEED_PRODUCTS:
        db.add(Product(
            name=name,
            category=category,
            price=Decimal(price),
            image=image,
            stock=stock,
            description=description,
        ))
    db.commit()
    logger.info("Seeded %d products", len(SEED_PRODUCTS))
    return len(SEED_PRODUCTS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    session = SessionLocal()
    try:
        seed_products(session)
    finally:
        session.close()
