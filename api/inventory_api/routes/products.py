from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from ..models import Product
from ..schemas.common import Message
from ..schemas.product import ProductRead, ProductUpdate
from ..database import get_session
from ..errors import InvalidInputError, NotFoundError, PersistenceError
from ..services.images import encode_upload
from ..services.validation import parse_price, validate_category, validate_name
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

DUPLICATE_NAME_MESSAGE = "Product with this name already exists."


def _name_taken(db: Session, name: str, exclude_id: Optional[str] = None) -> bool:
    # Read-then-write: two concurrent creates with the same name can both pass
    query = select(Product).where(Product.name == name)
    if exclude_id is not None:
        query = query.where(Product.id != exclude_id)
    return db.exec(query).first() is not None


@router.post("/add-product", response_model=Message, status_code=status.HTTP_201_CREATED)
def add_product(
    response: Response,
    name: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    description: str = Form(""),
    category: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_session)
):
    logger.debug(f"Add product request: name={name!r} price={price!r} category={category!r}")

    price_value = parse_price(price)
    name = validate_name(name)
    category_value = validate_category(category)

    try:
        if _name_taken(db, name):
            logger.info(f"Product already exists: {name}")
            raise InvalidInputError(DUPLICATE_NAME_MESSAGE)

        db_product = Product(
            name=name,
            price=price_value,
            description=description,
            category=category_value,
            image=encode_upload(image)
        )
        db.add(db_product)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving product: {str(e)}")
        raise PersistenceError("Error saving product.", str(e))

    response.headers["Location"] = f"/products/{db_product.id}"
    return Message(message="Product added successfully.")

@router.put("/products/{product_id}", response_model=ProductRead)
def update_product(
    product_id: str,
    product_update: ProductUpdate,
    db: Session = Depends(get_session)
):
    changes = {"price": parse_price(product_update.price)}
    if product_update.name is not None:
        changes["name"] = validate_name(product_update.name)
    if product_update.description is not None:
        changes["description"] = product_update.description
    if product_update.category is not None:
        changes["category"] = validate_category(product_update.category)

    try:
        db_product = db.get(Product, product_id)
        if not db_product:
            raise NotFoundError("Product not found.")

        if "name" in changes and _name_taken(db, changes["name"], exclude_id=product_id):
            raise InvalidInputError(DUPLICATE_NAME_MESSAGE)

        for field, value in changes.items():
            setattr(db_product, field, value)

        db.add(db_product)
        db.commit()
        db.refresh(db_product)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating product: {str(e)}")
        raise PersistenceError("Error updating product.", str(e))

    return db_product

@router.get("/products", response_model=List[ProductRead])
def get_products(db: Session = Depends(get_session)):
    try:
        return db.exec(select(Product)).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching products: {str(e)}")
        raise PersistenceError("Error fetching products.", str(e))

@router.delete("/products/{product_id}", response_model=Message)
def delete_product(product_id: str, db: Session = Depends(get_session)):
    try:
        product = db.get(Product, product_id)
        if not product:
            raise NotFoundError("Product not found.")

        db.delete(product)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting product: {str(e)}")
        raise PersistenceError("Error deleting product.", str(e))

    return Message(message="Product deleted successfully.")
