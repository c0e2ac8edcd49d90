# barbershop/stores/barbers.py

from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from barbershop.auth import hash_password, verify_password
from barbershop.core import to_title_case
from barbershop.errors import DuplicateBarber, InvalidCredentials, NotFound, StoreUnavailable, UploadFailure
from barbershop.log import get_logger
from barbershop.models import Barber
from barbershop.schemas import BarberCreate
from barbershop.storage import ImageStorage

logger = get_logger(__name__)


def list_barbers(session: Session) -> List[Barber]:
    try:
        return list(session.exec(select(Barber)).all())
    except SQLAlchemyError:
        logger.exception("Error in getting all the barbers")
        raise StoreUnavailable("Could not get barbers.")


def get_barber(session: Session, barber_id: str) -> Barber:
    try:
        barber = session.get(Barber, barber_id)
    except SQLAlchemyError:
        logger.exception("Error looking up barber %s", barber_id)
        raise StoreUnavailable("Could not get barber.")
    if barber is None:
        raise NotFound("User not found.")
    return barber


def register_barber(
    session: Session,
    storage: ImageStorage,
    registration: BarberCreate,
    image: bytes,
    content_type: str,
) -> Barber:
    """Create a barber with a profile image.

    The image is uploaded before the insert; a failed insert leaves the
    uploaded object in the bucket.
    """
    first_name = to_title_case(registration.first_name)
    last_name = to_title_case(registration.last_name)

    try:
        # 1) Same name already registered?
        existing = session.exec(
            select(Barber)
            .where(Barber.first_name == first_name)
            .where(Barber.last_name == last_name)
        ).first()
        if existing is not None:
            raise DuplicateBarber()

        # 2) Hash, upload, insert
        password_hash = hash_password(registration.password)
        image_url = storage.upload(image, content_type)

        barber = Barber(
            first_name=first_name,
            last_name=last_name,
            email=registration.email.lower(),
            password=password_hash,
            image_url=image_url,
            role="Barber",
            work_weekends=registration.work_weekends,
            opening_hour=registration.opening_hour,
            closing_hour=registration.closing_hour,
        )
        session.add(barber)
        session.commit()
    except IntegrityError:
        session.rollback()
        raise DuplicateBarber()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error adding barber %s %s", first_name, last_name)
        raise StoreUnavailable("Unable to add barber.")

    session.refresh(barber)
    logger.info("Barber %s added", barber.id)
    return barber


def authenticate(session: Session, email: str, password: str) -> Barber:
    try:
        barber = session.exec(select(Barber).where(Barber.email == email.lower())).first()
    except SQLAlchemyError:
        logger.exception("Error logging in %s", email)
        raise StoreUnavailable("Error logging in.")

    if barber is None:
        raise NotFound("User not found.")
    if not verify_password(password, barber.password):
        raise InvalidCredentials("Invalid credentials.")
    return barber


def delete_barber(session: Session, storage: ImageStorage, barber_id: str) -> None:
    """Remove a barber and its profile image. Services and appointments stay."""
    try:
        barber = session.get(Barber, barber_id)
        if barber is None:
            raise NotFound("Barber not found.")
        image_url = barber.image_url
        session.delete(barber)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error deleting barber %s", barber_id)
        raise StoreUnavailable("Unable to delete barber.")

    try:
        storage.delete(ImageStorage.key_from_url(image_url))
    except UploadFailure:
        # record is already gone; an orphaned image is not worth failing the request
        logger.warning("Profile image of barber %s was not removed", barber_id)
    logger.info("Barber %s deleted", barber_id)
