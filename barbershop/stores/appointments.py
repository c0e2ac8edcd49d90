# barbershop/stores/appointments.py

from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from barbershop.errors import BookingConflict, NotFound, StoreUnavailable
from barbershop.log import get_logger
from barbershop.models import Appointment
from barbershop.schemas import AppointmentCreate

logger = get_logger(__name__)


def list_appointments(session: Session, barber_id: str) -> List[Appointment]:
    try:
        stmt = (
            select(Appointment)
            .where(Appointment.barber_id == barber_id)
            .order_by(Appointment.date, Appointment.time)
        )
        return list(session.exec(stmt).all())
    except SQLAlchemyError:
        logger.exception("Error getting appointments of barber %s", barber_id)
        raise StoreUnavailable("Error getting appointments.")


def create_appointment(session: Session, payload: AppointmentCreate) -> Appointment:
    """Book a slot. Only an exact (barber, date, time) match counts as a collision."""
    try:
        existing = session.exec(
            select(Appointment)
            .where(Appointment.barber_id == payload.barber_id)
            .where(Appointment.date == payload.date)
            .where(Appointment.time == payload.time)
        ).first()
        if existing is not None:
            raise BookingConflict()

        appointment = Appointment(**payload.model_dump())
        session.add(appointment)
        session.commit()
    except IntegrityError:
        session.rollback()
        raise BookingConflict()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error booking appointment for barber %s", payload.barber_id)
        raise StoreUnavailable("Unable to book appointment.")

    session.refresh(appointment)
    logger.info("Appointment %s booked", appointment.id)
    return appointment


def delete_appointment(session: Session, appointment_id: str) -> None:
    try:
        appointment = session.get(Appointment, appointment_id)
        if appointment is None:
            raise NotFound("Appointment not found.")
        session.delete(appointment)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error deleting appointment %s", appointment_id)
        raise StoreUnavailable("Unable to delete appointment.")
    logger.info("Appointment %s deleted", appointment_id)
