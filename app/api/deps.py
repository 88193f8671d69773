# app/api/deps.py

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.database import get_session
from app.models.enums import ValidationStatus
from app.repositories.record_store import RecordStore
from app.services.analysis import AnalysisService
from app.services.budget_planning import BudgetPlanningService
from app.services.records import RecordService

def get_store(session: Session = Depends(get_session)) -> RecordStore:
    return RecordStore(session)

def get_analysis_service(store: RecordStore = Depends(get_store)) -> AnalysisService:
    return AnalysisService(store)

def get_budget_planning_service(store: RecordStore = Depends(get_store)) -> BudgetPlanningService:
    return BudgetPlanningService(store)

def get_record_service(store: RecordStore = Depends(get_store)) -> RecordService:
    return RecordService(store)

# Rechazos de negocio -> respuesta HTTP
_STATUS_ERRORS = {
    ValidationStatus.not_found: (status.HTTP_404_NOT_FOUND, "Usuario no encontrado"),
    ValidationStatus.invalid_amount_of_characters: (
        status.HTTP_400_BAD_REQUEST,
        "El título debe tener entre 2 y 50 caracteres.",
    ),
    ValidationStatus.invalid_amount: (
        status.HTTP_400_BAD_REQUEST,
        "El monto debe estar entre 1 y 10.000.000.",
    ),
    ValidationStatus.no_data_to_make_analysis: (
        status.HTTP_400_BAD_REQUEST,
        "No hay ingresos ni gastos registrados en ese mes.",
    ),
}

def raise_for_status(validation_status: ValidationStatus) -> None:
    if validation_status == ValidationStatus.success:
        return
    status_code, detail = _STATUS_ERRORS[validation_status]
    raise HTTPException(status_code=status_code, detail=detail)
