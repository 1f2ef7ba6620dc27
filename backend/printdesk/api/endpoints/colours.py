"""
Colour Endpoints

Colour catalog under /colours. Orders and filaments refer to colours by name,
so renaming or deleting a colour does not touch them.
"""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from printdesk.db.session import get_db
from printdesk.exceptions import NotFoundError
from printdesk.logging_config import audit_log, get_client_ip
from printdesk.models.colour import Colour
from printdesk.schemas.catalog import ColourCreate, ColourRead, ColourUpdate
from printdesk.schemas.common import ResourceId

router = APIRouter(prefix="/colours", tags=["Colours"])


def _get_colour_or_404(db: Session, colour_id: int) -> Colour:
    colour = db.query(Colour).filter(Colour.id == colour_id).first()
    if not colour:
        raise NotFoundError("colour", colour_id)
    return colour


@router.get("", response_model=List[ColourRead])
def list_colours(db: Session = Depends(get_db)):
    return db.query(Colour).order_by(Colour.id).all()


@router.post("", response_model=ResourceId, status_code=status.HTTP_201_CREATED)
def create_colour(payload: ColourCreate, request: Request, db: Session = Depends(get_db)):
    colour = Colour(colour_name=payload.colour_name)
    db.add(colour)
    db.commit()
    db.refresh(colour)

    audit_log(
        "COLOUR_CREATED",
        resource_type="colour",
        resource_id=colour.id,
        details={"colour_name": colour.colour_name},
        ip_address=get_client_ip(request),
    )
    return ResourceId(id=colour.id)


@router.put("/{colour_id}", response_model=ResourceId)
def update_colour(
    colour_id: int,
    payload: ColourUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    colour = _get_colour_or_404(db, colour_id)
    previous_name = colour.colour_name
    colour.colour_name = payload.colour_name
    db.commit()

    audit_log(
        "COLOUR_UPDATED",
        resource_type="colour",
        resource_id=colour_id,
        details={"from": previous_name, "to": payload.colour_name},
        ip_address=get_client_ip(request),
    )
    return ResourceId(id=colour_id)


@router.delete("/{colour_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_colour(colour_id: int, request: Request, db: Session = Depends(get_db)):
    colour = _get_colour_or_404(db, colour_id)
    db.delete(colour)
    db.commit()

    audit_log(
        "COLOUR_DELETED",
        resource_type="colour",
        resource_id=colour_id,
        ip_address=get_client_ip(request),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
