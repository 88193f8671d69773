from pydantic import BaseModel, ConfigDict, Field
from typing import List
from uuid import UUID

from app.schemas.expense import ExpenseRead
from app.schemas.income import IncomeRead

class MonthAnalysisCreate(BaseModel):
    month: int = Field(..., ge=1, le=12)
    year: int

class MonthAnalysisRead(BaseModel):
    id: int
    user_id: UUID
    year: int
    month: int
    summary_amount: float
    incomes: List[IncomeRead] = []
    expenses: List[ExpenseRead] = []

    model_config = ConfigDict(from_attributes=True)
