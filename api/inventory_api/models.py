from sqlmodel import Field, SQLModel
from sqlalchemy import Column, Text
from typing import Optional
from enum import Enum
from uuid import uuid4


"""
This file contains the models for the database tables.

We have 3 independent tables:
    - User
    - Profile
    - Product
"""

class Category(str, Enum):
    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    SPICES = "Spices"


def new_id() -> str:
    return uuid4().hex


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(default_factory=new_id, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
    hashed_password: str

class Profile(SQLModel, table=True):
    __tablename__ = "profiles"

    id: str = Field(default_factory=new_id, primary_key=True)
    first_name: str
    last_name: str
    gender: str
    address: str
    profile_image: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: str = Field(default_factory=new_id, primary_key=True)
    # Indexed, not unique: the duplicate check is done by the create handler
    name: str = Field(index=True)
    price: int = Field(ge=0)
    description: str = Field(default="")
    category: Category
    image: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
