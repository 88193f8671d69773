# app/models/links.py

from sqlmodel import SQLModel, Field

# Tablas intermedias: un análisis referencia los ingresos/gastos que usó al calcularse
class MonthAnalysisIncomeLink(SQLModel, table=True):
    __tablename__ = "month_analysis_income"

    month_analysis_id: int = Field(foreign_key="month_analysis.id", primary_key=True)
    income_id: int = Field(foreign_key="income.id", primary_key=True)

class MonthAnalysisExpenseLink(SQLModel, table=True):
    __tablename__ = "month_analysis_expense"

    month_analysis_id: int = Field(foreign_key="month_analysis.id", primary_key=True)
    expense_id: int = Field(foreign_key="expense.id", primary_key=True)
