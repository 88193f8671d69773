import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from uuid import UUID

from app.api.deps import get_record_service, raise_for_status
from app.core.security import get_current_user
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate, ExpenseRead
from app.services.records import RecordService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _get_own_expense(service: RecordService, expense_id: int, user_id: UUID) -> Expense:
    expense = service.get_record(Expense, expense_id)
    if not expense or expense.user_id != user_id:
        raise HTTPException(status_code=404, detail="Gasto no encontrado")
    return expense


@router.post("", response_model=ExpenseRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ExpenseRead, status_code=status.HTTP_201_CREATED)
def create_expense(
    expense_data: ExpenseCreate,
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
):
    expense, validation_status = service.create_record(Expense(**expense_data.model_dump()), user_id)
    raise_for_status(validation_status)
    return expense


@router.get("", response_model=List[ExpenseRead])
@router.get("/", response_model=List[ExpenseRead])
def list_expenses(
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
):
    return service.list_records(Expense, user_id, year, month)


@router.get("/{expense_id}", response_model=ExpenseRead)
def get_expense(
    expense_id: int,
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
):
    return _get_own_expense(service, expense_id, user_id)


@router.put("/{expense_id}", response_model=ExpenseRead)
def update_expense(
    expense_id: int,
    expense_data: ExpenseCreate,
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
):
    expense = _get_own_expense(service, expense_id, user_id)
    updated, validation_status = service.update_record(expense, expense_data.model_dump())
    raise_for_status(validation_status)
    return updated


@router.delete("/{expense_id}")
def delete_expense(
    expense_id: int,
    user_id: UUID = Depends(get_current_user),
    service: RecordService = Depends(get_record_service),
):
    expense = _get_own_expense(service, expense_id, user_id)
    service.delete_record(expense)
    logger.info("Gasto %s eliminado (usuario %s)", expense_id, user_id)
    return {"detail": "Gasto eliminado correctamente"}
