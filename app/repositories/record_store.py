# app/repositories/record_store.py

from typing import List, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import extract
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from app.models.budget_plan import BudgetPlan, BudgetPlanItem
from app.models.expense import Expense
from app.models.income import Income
from app.models.month_analysis import MonthAnalysis
from app.models.user import User

Record = TypeVar("Record", Income, Expense)

class RecordStore:
    """
    Acceso a datos sobre una sesión ya abierta.

    Los métodos de borrado/inserción solo marcan cambios en la sesión;
    nada se persiste hasta llamar a `commit()`. Los errores de base de datos
    se propagan tal cual.
    """

    def __init__(self, session: Session):
        self.session = session

    # Usuarios

    def find_user(self, user_id: UUID) -> Optional[User]:
        return self.session.get(User, user_id)

    # Ingresos y gastos

    def _list_records(
        self,
        model: Type[Record],
        user_id: UUID,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> List[Record]:
        query = select(model).where(model.user_id == user_id)
        if year is not None:
            query = query.where(extract("year", model.date) == year)
        if month is not None:
            query = query.where(extract("month", model.date) == month)
        return list(self.session.exec(query.order_by(model.date, model.id)).all())

    def list_incomes(self, user_id: UUID, year: Optional[int] = None, month: Optional[int] = None) -> List[Income]:
        return self._list_records(Income, user_id, year, month)

    def list_expenses(self, user_id: UUID, year: Optional[int] = None, month: Optional[int] = None) -> List[Expense]:
        return self._list_records(Expense, user_id, year, month)

    def get_record(self, model: Type[Record], record_id: int) -> Optional[Record]:
        return self.session.get(model, record_id)

    def insert_record(self, record: Record) -> None:
        self.session.add(record)

    def delete_record(self, record: Record) -> None:
        self.session.delete(record)

    # Análisis mensuales

    def get_month_analysis(self, analysis_id: int) -> Optional[MonthAnalysis]:
        return self.session.get(MonthAnalysis, analysis_id)

    def _month_analysis_query(self, user_id: UUID, year: int, month: int):
        return (
            select(MonthAnalysis)
            .where(
                MonthAnalysis.user_id == user_id,
                MonthAnalysis.year == year,
                MonthAnalysis.month == month,
            )
            .options(
                selectinload(MonthAnalysis.incomes),
                selectinload(MonthAnalysis.expenses),
            )
        )

    def find_month_analyses_by_key(self, user_id: UUID, year: int, month: int) -> List[MonthAnalysis]:
        return list(self.session.exec(self._month_analysis_query(user_id, year, month)).all())

    def find_month_analysis_by_key(self, user_id: UUID, year: int, month: int) -> Optional[MonthAnalysis]:
        return self.session.exec(self._month_analysis_query(user_id, year, month)).first()

    def delete_month_analyses(self, analyses: Sequence[MonthAnalysis]) -> None:
        for analysis in analyses:
            self.session.delete(analysis)

    def insert_month_analysis(self, analysis: MonthAnalysis) -> None:
        self.session.add(analysis)

    # Planes de presupuesto

    def get_budget_plan(self, plan_id: int) -> Optional[BudgetPlan]:
        return self.session.exec(
            select(BudgetPlan)
            .where(BudgetPlan.id == plan_id)
            .options(selectinload(BudgetPlan.items))
        ).first()

    def find_budget_plan_by_user(self, user_id: UUID) -> Optional[BudgetPlan]:
        return self.session.exec(
            select(BudgetPlan)
            .where(BudgetPlan.user_id == user_id)
            .options(selectinload(BudgetPlan.items))
        ).first()

    def delete_budget_plan_items(self, items: Sequence[BudgetPlanItem]) -> None:
        for item in list(items):
            self.session.delete(item)

    def delete_budget_plan(self, plan: BudgetPlan) -> None:
        self.session.delete(plan)

    def insert_budget_plan(self, plan: BudgetPlan) -> None:
        self.session.add(plan)

    # Persistencia

    def commit(self) -> None:
        self.session.commit()

    def refresh(self, instance) -> None:
        self.session.refresh(instance)
