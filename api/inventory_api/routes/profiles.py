from fastapi import APIRouter, Depends, status
from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError
from typing import List
from ..models import Profile
from ..schemas.common import Message
from ..schemas.profile import ProfileCreate, ProfileRead
from ..database import get_session
from ..errors import NotFoundError, PersistenceError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/profiles", response_model=List[ProfileRead])
def get_profiles(db: Session = Depends(get_session)):
    try:
        return db.exec(select(Profile)).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching profiles: {str(e)}")
        raise PersistenceError("Error fetching profiles.", str(e))

@router.post("/profiles", response_model=ProfileRead, status_code=status.HTTP_201_CREATED)
def create_profile(profile: ProfileCreate, db: Session = Depends(get_session)):
    # Fields are stored as given; completeness is checked by the dashboard form
    db_profile = Profile(**profile.model_dump())
    try:
        db.add(db_profile)
        db.commit()
        db.refresh(db_profile)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error adding profile: {str(e)}")
        raise PersistenceError("Error adding profile.", str(e))
    return db_profile

@router.delete("/profiles/{profile_id}", response_model=Message)
def delete_profile(profile_id: str, db: Session = Depends(get_session)):
    try:
        profile = db.get(Profile, profile_id)
        if not profile:
            raise NotFoundError("Profile not found.")

        db.delete(profile)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting profile: {str(e)}")
        raise PersistenceError("Error deleting profile.", str(e))

    return Message(message="Profile deleted successfully.")
