"""Rental registration, editing, removal and the rentals report."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from database import get_db
from errors import AppError, NotFound
from schemas import RemoveRentalForm, RentalForm, parse_form
from services.property_service import PropertyService
from services.rental_service import RentalService
from storage import UploadStorage, get_storage
from .auth import AuthContext, require_admin
from .common import redirect_to, templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Rentals"])


@router.get("/aluguel/editar/{rental_id}")
def edit_rental_page(
        request: Request,
        rental_id: int,
        db: Session = Depends(get_db),
        auth: AuthContext = Depends(require_admin),
):
    """Displays the rental edit form with its property and client."""
    try:
        rental = RentalService(db).get_for_edit(rental_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Rental not found")

    return templates.TemplateResponse(request, "editar-aluguel.html", {"aluguel": rental})


@router.post("/aluguel/editar/{rental_id}")
async def update_rental(
        request: Request,
        rental_id: int,
        db: Session = Depends(get_db),
        auth: AuthContext = Depends(require_admin),
):
    """Updates the client and dates of a rental and recomputes its total."""
    try:
        form = parse_form(RentalForm, await request.form())
        RentalService(db).edit(
            rental_id, form.client_fields(), form.start_date, form.end_date, form.informed_total
        )
    except AppError as exc:
        logger.error("Error updating rental %s: %s", rental_id, exc.message)
        return redirect_to("/alugueis", error=exc.flag)

    return redirect_to("/alugueis", success="Aluguel atualizado com sucesso")


@router.post("/aluguel/remover")
async def remove_rental(
        request: Request,
        db: Session = Depends(get_db),
        auth: AuthContext = Depends(require_admin),
):
    """Ends a rental: deletes it with its client and frees the property."""
    try:
        form = parse_form(RemoveRentalForm, await request.form())
        RentalService(db).remove(form.rental_id, form.client_id, form.property_id)
    except AppError as exc:
        logger.error("Error removing rental: %s", exc.message)
        return redirect_to("/alugueis", error=exc.flag)

    return redirect_to("/alugueis", removido=1)


@router.get("/aluguel/{property_id}")
def rental_page(
        request: Request,
        property_id: int,
        db: Session = Depends(get_db),
        storage: UploadStorage = Depends(get_storage),
        auth: AuthContext = Depends(require_admin),
):
    """Displays the rental registration form for an available property."""
    try:
        prop = PropertyService(db, storage).get_available(property_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Property not found or already rented")

    return templates.TemplateResponse(request, "pagina-aluguel.html", {"casa": prop})


@router.post("/aluguel/{property_id}")
async def register_rental(
        request: Request,
        property_id: int,
        db: Session = Depends(get_db),
        auth: AuthContext = Depends(require_admin),
):
    """Registers a new rental for the property and marks it as rented."""
    try:
        form = parse_form(RentalForm, await request.form())
        RentalService(db).register(
            property_id, form.client_fields(), form.start_date, form.end_date, form.informed_total
        )
    except AppError as exc:
        logger.error("Error registering rental for property %s: %s", property_id, exc.message)
        return redirect_to("/alugueis", error=exc.flag)

    return redirect_to("/alugueis", success="Aluguel registrado com sucesso")


@router.get("/relatorio-alugueis")
def rentals_report_page(
        request: Request,
        db: Session = Depends(get_db),
        auth: AuthContext = Depends(require_admin),
):
    """Report of all rentals, most recent start date first."""
    rows = RentalService(db).report()
    return templates.TemplateResponse(request, "relatorio.html", {"alugueis": rows})
