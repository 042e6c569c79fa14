from pydantic import BaseModel
from typing import Any, Optional
from ..models import Category

class ProductBase(BaseModel):
    name: str
    price: int
    description: str = ""
    category: Category

class ProductRead(ProductBase):
    id: str
    image: Optional[str] = None

    class Config:
        from_attributes = True

class ProductUpdate(BaseModel):
    name: Optional[str] = None
    # Left untyped so that bad prices get the same 400 message as on create
    price: Any = None
    description: Optional[str] = None
    category: Optional[str] = None
