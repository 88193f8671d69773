# app/models/month_analysis.py

from sqlalchemy import UniqueConstraint
from sqlmodel import Relationship, SQLModel, Field
from uuid import UUID
from typing import List, Optional, TYPE_CHECKING

from app.models.links import MonthAnalysisExpenseLink, MonthAnalysisIncomeLink

if TYPE_CHECKING:
    from app.models.expense import Expense
    from app.models.income import Income

class MonthAnalysis(SQLModel, table=True):
    __tablename__ = "month_analysis"
    # Un único análisis por (usuario, año, mes)
    __table_args__ = (
        UniqueConstraint("user_id", "year", "month", name="uq_month_analysis_user_year_month"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    year: int
    month: int  # 1-12
    summary_amount: float  # ingresos - gastos

    incomes: List["Income"] = Relationship(
        back_populates="month_analyses", link_model=MonthAnalysisIncomeLink
    )
    expenses: List["Expense"] = Relationship(
        back_populates="month_analyses", link_model=MonthAnalysisExpenseLink
    )
