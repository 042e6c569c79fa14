"""
Fill an empty database with demo accounts, products and customer profiles.

Run with:
    python -m inventory_api.seed
"""

from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError
from .config import ConfigurationError, get_settings
from .database import Database
from .models import Category, Product, Profile, User
from .services.accounts import create_user
import logging
import sys

logger = logging.getLogger(__name__)


DEMO_USERS = [
    {"name": "Admin", "email": "admin@example.com", "password": "change-me-admin"},
    {"name": "Staff", "email": "staff@example.com", "password": "change-me-staff"},
]

DEMO_PRODUCTS = [
    {"name": "Apple", "price": 25, "description": "Red apples, per piece", "category": Category.FRUITS},
    {"name": "Banana", "price": 10, "description": "Lakatan bananas", "category": Category.FRUITS},
    {"name": "Carrot", "price": 15, "description": "Fresh carrots", "category": Category.VEGETABLES},
    {"name": "Cabbage", "price": 40, "description": "Whole head", "category": Category.VEGETABLES},
    {"name": "Black Pepper", "price": 30, "description": "Ground, 50g", "category": Category.SPICES},
]

DEMO_PROFILES = [
    {"first_name": "Maria", "last_name": "Santos", "gender": "Female", "address": "12 Mabini St."},
    {"first_name": "Jose", "last_name": "Reyes", "gender": "Male", "address": "4 Rizal Ave."},
]


def seed(db: Session) -> dict:
    """Insert the demo records into every table that is still empty."""
    counts = {"users": 0, "products": 0, "profiles": 0}

    if db.exec(select(User)).first() is None:
        for user in DEMO_USERS:
            create_user(db, **user)
            counts["users"] += 1

    if db.exec(select(Product)).first() is None:
        for product in DEMO_PRODUCTS:
            db.add(Product(**product))
            counts["products"] += 1

    if db.exec(select(Profile)).first() is None:
        for profile in DEMO_PROFILES:
            db.add(Profile(**profile))
            counts["profiles"] += 1

    db.commit()
    return counts


def main():
    logging.basicConfig(level=logging.INFO)
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    database = Database(settings.database_url, echo=settings.sql_echo)
    try:
        database.init_db()
        with database.session() as session:
            counts = seed(session)
        logger.info(f"Seeded {counts}")
    except SQLAlchemyError as e:
        logger.error(f"Error seeding database: {str(e)}")
        sys.exit(1)
    finally:
        database.close()


if __name__ == "__main__":
    main()
