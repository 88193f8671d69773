# app/schemas/budget_plan.py

from pydantic import BaseModel, ConfigDict
from typing import List
from uuid import UUID

class BudgetPlanItemCreate(BaseModel):
    title: str
    amount: float
    is_income: bool = False

class BudgetPlanItemRead(BudgetPlanItemCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)

class BudgetPlanCreate(BaseModel):
    summary_amount: float = 0.0  # calculado por el cliente
    items: List[BudgetPlanItemCreate] = []

class BudgetPlanRead(BaseModel):
    id: int
    user_id: UUID
    summary_amount: float
    items: List[BudgetPlanItemRead] = []

    model_config = ConfigDict(from_attributes=True)
