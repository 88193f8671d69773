import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from uuid import UUID

from app.api.deps import get_analysis_service, raise_for_status
from app.core.security import get_current_user
from app.schemas.month_analysis import MonthAnalysisCreate, MonthAnalysisRead
from app.services.analysis import AnalysisService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyses", tags=["analyses"])


@router.post("", response_model=MonthAnalysisRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=MonthAnalysisRead, status_code=status.HTTP_201_CREATED)
def create_month_analysis(
    analysis_data: MonthAnalysisCreate,
    user_id: UUID = Depends(get_current_user),
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Genera (o regenera) el análisis del mes. Si ya existía uno para ese
    mes y año se reemplaza por el nuevo.
    """
    analysis, validation_status = service.create_month_analysis(
        analysis_data.month, analysis_data.year, user_id
    )
    raise_for_status(validation_status)
    return analysis


# Debe ir antes de /{analysis_id}
@router.get("/by-month", response_model=MonthAnalysisRead)
def get_month_analysis_by_month(
    month: int = Query(..., ge=1, le=12),
    year: int = Query(...),
    user_id: UUID = Depends(get_current_user),
    service: AnalysisService = Depends(get_analysis_service),
):
    analysis = service.get_month_analysis_by_month(month, year, user_id)
    if not analysis:
        raise HTTPException(status_code=404, detail="No existe análisis para ese mes y año.")
    return analysis


@router.get("/{analysis_id}", response_model=MonthAnalysisRead)
def get_month_analysis(
    analysis_id: int,
    user_id: UUID = Depends(get_current_user),
    service: AnalysisService = Depends(get_analysis_service),
):
    analysis = service.get_month_analysis(analysis_id)
    if not analysis:
        raise HTTPException(status_code=404, detail="Análisis no encontrado")

    if analysis.user_id != user_id:
        logger.warning("Usuario %s sin acceso al análisis %s", user_id, analysis_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="No autorizado")
    return analysis
