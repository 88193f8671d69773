import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from uuid import UUID

from app.api.deps import get_record_service, raise_for_status
from app.core.security import get_current_user
from app.models.income import Income
from app.schemas.income import IncomeCreate, IncomeRead
from app.services.records import RecordService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/incomes", tags=["incomes"])


def _get_own_income(service: RecordService, income_id: int, user_id: UUID) -> Income:
    income = service.get_record(Income, income_id)
    if not income or income.user_id != user_id:
        raise HTTPException(status_code=404, detail="Ingreso no encontrado")
    return income


@router.post("", response_model=IncomeRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=IncomeRead, status_code=status.HTTP_201_CREATED)
def create_income(
    income_data: IncomeCreate,
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
):
    income, validation_status = service.create_record(Income(**income_data.model_dump()), user_id)
    raise_for_status(validation_status)
    return income


@router.get("", response_model=List[IncomeRead])
@router.get("/", response_model=List[IncomeRead])
def list_incomes(
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
):
    return service.list_records(Income, user_id, year, month)


@router.get("/{income_id}", response_model=IncomeRead)
def get_income(
    income_id: int,
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
):
    return _get_own_income(service, income_id, user_id)


@router.put("/{income_id}", response_model=IncomeRead)
def update_income(
    income_id: int,
    income_data: IncomeCreate,
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
):
    income = _get_own_income(service, income_id, user_id)
    updated, validation_status = service.update_record(income, income_data.model_dump())
    raise_for_status(validation_status)
    return updated


@router.delete("/{income_id}")
def delete_income(
    income_id: int,
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
):
    income = _get_own_income(service, income_id, user_id)
    service.delete_record(income)
    logger.info("Ingreso %s eliminado (usuario %s)", income_id, user_id)
    return {"detail": "Ingreso eliminado correctamente"}
