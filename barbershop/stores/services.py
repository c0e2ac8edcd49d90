# barbershop/stores/services.py

from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from barbershop.errors import DuplicateService, NotFound, StoreUnavailable
from barbershop.log import get_logger
from barbershop.models import Service
from barbershop.schemas import ServiceCreate

logger = get_logger(__name__)


def list_services(session: Session, barber_id: str) -> List[Service]:
    try:
        return list(session.exec(select(Service).where(Service.barber_id == barber_id)).all())
    except SQLAlchemyError:
        logger.exception("Error getting services of barber %s", barber_id)
        raise StoreUnavailable("Error getting services.")


def create_service(session: Session, payload: ServiceCreate) -> Service:
    # titles are unique per barber, not across the shop
    try:
        existing = session.exec(
            select(Service)
            .where(Service.barber_id == payload.barber_id)
            .where(Service.title == payload.title)
        ).first()
        if existing is not None:
            raise DuplicateService()

        service = Service(
            barber_id=payload.barber_id,
            title=payload.title,
            description=payload.description,
            price=payload.price,
            length=payload.length,
        )
        session.add(service)
        session.commit()
    except IntegrityError:
        session.rollback()
        raise DuplicateService()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error creating service %r", payload.title)
        raise StoreUnavailable("An error occurred while trying to create the service.")

    session.refresh(service)
    logger.info("Service %s created for barber %s", service.id, service.barber_id)
    return service


def delete_service(session: Session, service_id: str) -> None:
    try:
        service = session.get(Service, service_id)
        if service is None:
            raise NotFound("Service not found.")
        session.delete(service)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error deleting service %s", service_id)
        raise StoreUnavailable("Unable to delete service.")
    logger.info("Service %s deleted", service_id)
