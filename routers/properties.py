"""Property creation, editing, deletion and the management listing."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from sqlalchemy.orm import Session

from database import get_db
from errors import AppError, NotFound
from schemas import PropertyForm, parse_form
from services.property_service import PropertyService
from storage import UploadStorage, get_storage
from .auth import AuthContext, require_admin
from .common import redirect_to, templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Properties"])


@router.post("/casas")
async def create_property(
        request: Request,
        imagens: List[UploadFile] = File(default=[]),
        db: Session = Depends(get_db),
        storage: UploadStorage = Depends(get_storage),
        auth: AuthContext = Depends(require_admin),
):
    """Creates a property together with its uploaded images."""
    try:
        fields = parse_form(PropertyForm, await request.form())
        PropertyService(db, storage).create(fields, imagens)
    except AppError as exc:
        logger.error("Error creating property: %s", exc.message)
        return redirect_to("/dashboard", error=exc.flag)

    return redirect_to("/dashboard", success=1)


@router.get("/alugueis")
def manage_properties_page(
        request: Request,
        success: Optional[str] = None,
        removido: Optional[str] = None,
        casa_excluida: Optional[str] = None,
        error: Optional[str] = None,
        db: Session = Depends(get_db),
        storage: UploadStorage = Depends(get_storage),
        auth: AuthContext = Depends(require_admin),
):
    """Lists every property with its active rental, if any."""
    properties = PropertyService(db, storage).list()
    return templates.TemplateResponse(request, "alugueis.html", {
        "casas": properties,
        "success": success,
        "removido": removido,
        "casa_excluida": casa_excluida,
        "error": error,
    })


@router.get("/casa/editar/{property_id}")
def edit_property_page(
        request: Request,
        property_id: int,
        db: Session = Depends(get_db),
        storage: UploadStorage = Depends(get_storage),
        auth: AuthContext = Depends(require_admin),
):
    """Displays the property edit form."""
    try:
        prop = PropertyService(db, storage).get(property_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Property not found")

    return templates.TemplateResponse(request, "editar-casa.html", {"casa": prop})


@router.post("/casa/editar/{property_id}")
async def update_property(
        request: Request,
        property_id: int,
        db: Session = Depends(get_db),
        storage: UploadStorage = Depends(get_storage),
        auth: AuthContext = Depends(require_admin),
):
    """Saves the edited property fields."""
    try:
        fields = parse_form(PropertyForm, await request.form())
        PropertyService(db, storage).update(property_id, fields)
    except AppError as exc:
        logger.error("Error updating property %s: %s", property_id, exc.message)
        return redirect_to("/alugueis", error=exc.flag)

    return redirect_to("/alugueis", success="Casa atualizada com sucesso")


@router.post("/casa/excluir/{property_id}")
def delete_property(
        property_id: int,
        db: Session = Depends(get_db),
        storage: UploadStorage = Depends(get_storage),
        auth: AuthContext = Depends(require_admin),
):
    """Deletes a property, its image records and the stored image files."""
    try:
        PropertyService(db, storage).delete(property_id)
    except AppError as exc:
        logger.error("Error deleting property %s: %s", property_id, exc.message)
        return redirect_to("/alugueis", error=exc.flag)

    return redirect_to("/alugueis", casa_excluida=1)
