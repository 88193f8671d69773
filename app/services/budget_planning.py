# app/services/budget_planning.py

import logging
from typing import Optional, Sequence
from uuid import UUID

from app.models.budget_plan import BudgetPlan, BudgetPlanItem
from app.models.enums import ValidationStatus
from app.repositories.record_store import RecordStore
from app.services.result import ServiceResult
from app.utils.validation import validate_item

logger = logging.getLogger(__name__)


class BudgetPlanningService:
    def __init__(self, store: RecordStore):
        self.store = store

    def create_budget_plan(
        self,
        plan: BudgetPlan,
        items: Sequence[BudgetPlanItem],
        user_id: UUID,
    ) -> ServiceResult[BudgetPlan]:
        """
        Reemplaza el plan de presupuesto del usuario por `plan` con sus `items`.

        Todos los ítems se validan antes de tocar nada: si alguno falla,
        el plan anterior queda intacto.
        """
        user = self.store.find_user(user_id)
        if not user:
            logger.warning("Plan de presupuesto rechazado: usuario %s no existe", user_id)
            return ServiceResult.rejected(ValidationStatus.not_found)

        for item in items:
            status = validate_item(item.title, item.amount)
            if status != ValidationStatus.success:
                logger.warning(
                    "Plan de presupuesto rechazado para el usuario %s: %s (%r)",
                    user.id, status.value, item.title,
                )
                return ServiceResult.rejected(status)

        previous = self.store.find_budget_plan_by_user(user.id)
        if previous:
            previous_id = previous.id
            # Primero los ítems, después el plan
            self.store.delete_budget_plan_items(previous.items)
            self.store.delete_budget_plan(previous)
            self.store.commit()
            logger.info("Plan de presupuesto %s eliminado (usuario %s)", previous_id, user.id)

        plan.user_id = user.id
        self.store.insert_budget_plan(plan)
        for item in items:
            plan.items.append(item)
        self.store.commit()
        self.store.refresh(plan)

        logger.info("Plan de presupuesto %s creado con %d ítems (usuario %s)", plan.id, len(items), user.id)
        return ServiceResult.ok(plan)

    def get_budget_plan(self, plan_id: int) -> Optional[BudgetPlan]:
        return self.store.get_budget_plan(plan_id)

    def get_user_budget_plan(self, user_id: UUID) -> Optional[BudgetPlan]:
        return self.store.find_budget_plan_by_user(user_id)
