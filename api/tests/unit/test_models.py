import pytest
from sqlmodel import select
from sqlalchemy.exc import IntegrityError
from inventory_api.models import Category, Product, Profile, User, new_id


# Category Tests
def test_category_enum():
    assert Category.FRUITS == "Fruits"
    assert Category.VEGETABLES == "Vegetables"
    assert Category.SPICES == "Spices"

    with pytest.raises(ValueError):
        Category("Dairy")

def test_new_id_is_opaque_hex():
    first, second = new_id(), new_id()
    assert first != second
    assert len(first) == 32
    int(first, 16)

# Product Model Tests
def test_product_creation():
    product = Product(name="Apple", price=25, category=Category.FRUITS)
    assert product.name == "Apple"
    assert product.price == 25
    assert product.description == ""
    assert product.image is None
    assert product.category == Category.FRUITS
    assert product.id

def test_product_roundtrip(session):
    product = Product(name="Carrot", price=15, description="Fresh", category=Category.VEGETABLES, image="aGk=")
    session.add(product)
    session.commit()

    stored = session.get(Product, product.id)
    assert stored.name == "Carrot"
    assert stored.category == Category.VEGETABLES
    assert stored.image == "aGk="

def test_product_name_not_unique_in_storage(session):
    # Only the create handler's read-then-write check prevents duplicates,
    # so two writers that both pass the check end up with two rows.
    session.add(Product(name="Apple", price=1, category=Category.FRUITS))
    session.add(Product(name="Apple", price=2, category=Category.FRUITS))
    session.commit()

    apples = session.exec(select(Product).where(Product.name == "Apple")).all()
    assert len(apples) == 2

# Profile Model Tests
def test_profile_creation(session):
    profile = Profile(first_name="Jose", last_name="Reyes", gender="Male", address="4 Rizal Ave.")
    session.add(profile)
    session.commit()

    stored = session.get(Profile, profile.id)
    assert stored.first_name == "Jose"
    assert stored.profile_image is None

# User Model Tests
def test_user_email_unique(session):
    session.add(User(name="A", email="same@example.com", hashed_password="x"))
    session.commit()

    session.add(User(name="B", email="same@example.com", hashed_password="y"))
    with pytest.raises(IntegrityError):
        session.commit()
