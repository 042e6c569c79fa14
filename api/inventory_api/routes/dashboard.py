from fastapi import APIRouter, Depends
from sqlmodel import Session, select, func
from sqlalchemy.exc import SQLAlchemyError
from ..models import Product, User
from ..schemas.common import Total
from ..database import get_session
from ..errors import PersistenceError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def _count(db: Session, model) -> int:
    return db.exec(select(func.count()).select_from(model)).one()


@router.get("/total-users", response_model=Total)
def total_users(db: Session = Depends(get_session)):
    try:
        return Total(total=_count(db, User))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching user count: {str(e)}")
        raise PersistenceError("Error fetching user count.", str(e))

@router.get("/total-products", response_model=Total)
def total_products(db: Session = Depends(get_session)):
    try:
        return Total(total=_count(db, Product))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching product count: {str(e)}")
        raise PersistenceError("Error fetching product count.", str(e))
