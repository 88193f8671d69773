# app/models/income.py

import datetime as dt
from sqlmodel import Relationship, SQLModel, Field
from uuid import UUID
from typing import List, Optional, TYPE_CHECKING

from app.models.links import MonthAnalysisIncomeLink

if TYPE_CHECKING:
    from app.models.month_analysis import MonthAnalysis

class Income(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    title: str = Field(max_length=50)
    amount: float
    date: dt.date
    is_recurring: bool = Field(default=False)

    # Al borrar un ingreso se eliminan también sus filas de enlace con los análisis
    month_analyses: List["MonthAnalysis"] = Relationship(
        back_populates="incomes", link_model=MonthAnalysisIncomeLink
    )
