# app/models/budget_plan.py

from sqlmodel import Relationship, SQLModel, Field
from uuid import UUID
from typing import List, Optional

class BudgetPlan(SQLModel, table=True):
    __tablename__ = "budget_plan"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", unique=True)  # un plan por usuario
    summary_amount: float = 0.0  # lo envía el cliente, no se recalcula

    items: List["BudgetPlanItem"] = Relationship(back_populates="budget_plan")

class BudgetPlanItem(SQLModel, table=True):
    __tablename__ = "budget_plan_item"

    id: Optional[int] = Field(default=None, primary_key=True)
    budget_plan_id: Optional[int] = Field(default=None, foreign_key="budget_plan.id", index=True)
    title: str = Field(max_length=50)
    amount: float
    is_income: bool = Field(default=False)

    budget_plan: Optional[BudgetPlan] = Relationship(back_populates="items")
