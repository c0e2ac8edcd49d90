# barbershop/routers/appointments_routes.py

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from barbershop.deps import get_session
from barbershop.schemas import AppointmentCreate, AppointmentDelete, AppointmentPublic, Message
from barbershop.stores import appointments as appointment_store

router = APIRouter(
    tags=["appointments"],
)


@router.get("/appointments", response_model=List[AppointmentPublic])
def list_appointments(
    barber_id: str = Query(..., alias="barberId"),
    session: Session = Depends(get_session),
):
    return appointment_store.list_appointments(session, barber_id)


@router.post("/appointments", response_model=Message)
def create_appointment(
    appt: AppointmentCreate,
    session: Session = Depends(get_session),
):
    appointment_store.create_appointment(session, appt)
    return {"message": "Appointment booked successfully."}


@router.delete("/appointments/", response_model=Message)
def delete_appointment(
    body: AppointmentDelete,
    session: Session = Depends(get_session),
):
    appointment_store.delete_appointment(session, body.appointment_id)
    return {"message": "Appointment deleted successfully."}
