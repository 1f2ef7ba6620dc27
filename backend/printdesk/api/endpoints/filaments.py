"""
Filament Endpoints

Spool catalog under /filaments. Usage booked by order saves arrives here as a
plain PUT with the increased amount_used.
"""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from printdesk.db.session import get_db
from printdesk.exceptions import NotFoundError
from printdesk.logging_config import audit_log, get_client_ip
from printdesk.models.filament import Filament
from printdesk.schemas.catalog import FilamentCreate, FilamentRead, FilamentUpdate
from printdesk.schemas.common import ResourceId

router = APIRouter(prefix="/filaments", tags=["Filaments"])


def _get_filament_or_404(db: Session, filament_id: int) -> Filament:
    filament = db.query(Filament).filter(Filament.id == filament_id).first()
    if not filament:
        raise NotFoundError("filament", filament_id)
    return filament


@router.get("", response_model=List[FilamentRead])
def list_filaments(db: Session = Depends(get_db)):
    return db.query(Filament).order_by(Filament.id).all()


@router.post("", response_model=ResourceId, status_code=status.HTTP_201_CREATED)
def create_filament(payload: FilamentCreate, request: Request, db: Session = Depends(get_db)):
    filament = Filament(**payload.model_dump())
    db.add(filament)
    db.commit()
    db.refresh(filament)

    audit_log(
        "FILAMENT_CREATED",
        resource_type="filament",
        resource_id=filament.id,
        details={"material": filament.material, "colour_name": filament.colour_name, "size": filament.size},
        ip_address=get_client_ip(request),
    )
    return ResourceId(id=filament.id)


@router.put("/{filament_id}", response_model=ResourceId)
def update_filament(
    filament_id: int,
    payload: FilamentUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    filament = _get_filament_or_404(db, filament_id)
    previous_used = filament.amount_used
    for field, value in payload.model_dump(exclude={"id"}).items():
        setattr(filament, field, value)
    db.commit()

    audit_log(
        "FILAMENT_UPDATED",
        resource_type="filament",
        resource_id=filament_id,
        details={"amount_used_before": previous_used, "amount_used": filament.amount_used},
        ip_address=get_client_ip(request),
    )
    return ResourceId(id=filament_id)


@router.delete("/{filament_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_filament(filament_id: int, request: Request, db: Session = Depends(get_db)):
    filament = _get_filament_or_404(db, filament_id)
    db.delete(filament)
    db.commit()

    audit_log(
        "FILAMENT_DELETED",
        resource_type="filament",
        resource_id=filament_id,
        ip_address=get_client_ip(request),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
