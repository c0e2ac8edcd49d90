# barbershop/routers/services_routes.py

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from barbershop.deps import get_session
from barbershop.schemas import Message, ServiceCreate, ServiceCreated, ServiceDelete, ServicePublic
from barbershop.stores import services as service_store

router = APIRouter(
    prefix="/service",
    tags=["services"],
)


# 201 on a read is what existing clients expect
@router.get("", response_model=List[ServicePublic], status_code=201)
def list_services(
    barber_id: str = Query(..., alias="_id"),
    session: Session = Depends(get_session),
):
    return service_store.list_services(session, barber_id)


@router.post("", response_model=ServiceCreated, status_code=201)
def create_service(
    payload: ServiceCreate,
    session: Session = Depends(get_session),
):
    service = service_store.create_service(session, payload)
    return ServiceCreated(message="Service created successfully.", id=service.id, title=service.title)


@router.delete("", response_model=Message)
def delete_service(
    body: ServiceDelete,
    session: Session = Depends(get_session),
):
    service_store.delete_service(session, body.service_id)
    return {"message": "Service deleted successfully."}
