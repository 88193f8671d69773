# app/services/analysis.py

import logging
from typing import Optional, Sequence
from uuid import UUID

from app.models.enums import ValidationStatus
from app.models.expense import Expense
from app.models.income import Income
from app.models.month_analysis import MonthAnalysis
from app.repositories.record_store import RecordStore
from app.services.result import ServiceResult

logger = logging.getLogger(__name__)


def calculate_summary_amount(incomes: Sequence[Income], expenses: Sequence[Expense]) -> float:
    """Ingresos menos gastos."""
    return sum(income.amount for income in incomes) - sum(expense.amount for expense in expenses)


class AnalysisService:
    def __init__(self, store: RecordStore):
        self.store = store

    def create_month_analysis(self, month: int, year: int, user_id: UUID) -> ServiceResult[MonthAnalysis]:
        """
        Calcula el análisis de (año, mes) para el usuario y reemplaza el anterior.

        El análisis previo se borra siempre, incluso si luego no hay datos para
        generar uno nuevo. El nuevo análisis recibe un id distinto.
        """
        user = self.store.find_user(user_id)
        if not user:
            logger.warning("Análisis %s/%s rechazado: usuario %s no existe", month, year, user_id)
            return ServiceResult.rejected(ValidationStatus.not_found)

        previous = self.store.find_month_analyses_by_key(user.id, year, month)
        if previous:
            self.store.delete_month_analyses(previous)
            self.store.commit()
            logger.info(
                "Eliminados %d análisis previos de %s/%s para el usuario %s",
                len(previous), month, year, user.id,
            )

        incomes = self.store.list_incomes(user.id, year, month)
        expenses = self.store.list_expenses(user.id, year, month)
        if not incomes and not expenses:
            logger.warning("Sin ingresos ni gastos en %s/%s para el usuario %s", month, year, user.id)
            return ServiceResult.rejected(ValidationStatus.no_data_to_make_analysis)

        analysis = MonthAnalysis(
            user_id=user.id,
            year=year,
            month=month,
            summary_amount=calculate_summary_amount(incomes, expenses),
            incomes=incomes,
            expenses=expenses,
        )
        self.store.insert_month_analysis(analysis)
        self.store.commit()
        self.store.refresh(analysis)

        logger.info(
            "Análisis %s creado para %s/%s (usuario %s, resumen %.2f)",
            analysis.id, month, year, user.id, analysis.summary_amount,
        )
        return ServiceResult.ok(analysis)

    def get_month_analysis(self, analysis_id: int) -> Optional[MonthAnalysis]:
        return self.store.get_month_analysis(analysis_id)

    def get_month_analysis_by_month(self, month: int, year: int, user_id: UUID) -> Optional[MonthAnalysis]:
        # Si el usuario no existe no se devuelve nada, aunque haya un análisis con esa clave
        user = self.store.find_user(user_id)
        if not user:
            return None
        return self.store.find_month_analysis_by_key(user.id, year, month)
