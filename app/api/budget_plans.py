import logging
from fastapi import APIRouter, Depends, HTTPException, status
from uuid import UUID

from app.api.deps import get_budget_planning_service, raise_for_status
from app.core.security import get_current_user
from app.models.budget_plan import BudgetPlan, BudgetPlanItem
from app.schemas.budget_plan import BudgetPlanCreate, BudgetPlanRead
from app.services.budget_planning import BudgetPlanningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/budget-plans", tags=["budget_plans"])


@router.post("", response_model=BudgetPlanRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=BudgetPlanRead, status_code=status.HTTP_201_CREATED)
def create_budget_plan(
    plan_data: BudgetPlanCreate,
    user_id: UUID = Depends(get_current_user),
    service: BudgetPlanningService = Depends(get_budget_planning_service),
):
    """
    Crea el plan de presupuesto del usuario. Si ya tenía uno, el anterior
    (con todos sus ítems) se elimina.
    """
    items = [BudgetPlanItem(**item.model_dump()) for item in plan_data.items]
    plan = BudgetPlan(summary_amount=plan_data.summary_amount)

    created, validation_status = service.create_budget_plan(plan, items, user_id)
    raise_for_status(validation_status)
    return created


@router.get("/me", response_model=BudgetPlanRead)
def get_my_budget_plan(
    user_id: UUID = Depends(get_current_user),
    service: BudgetPlanningService = Depends(get_budget_planning_service),
):
    plan = service.get_user_budget_plan(user_id)
    if not plan:
        raise HTTPException(status_code=404, detail="No tienes un plan de presupuesto.")
    return plan


@router.get("/{plan_id}", response_model=BudgetPlanRead)
def get_budget_plan(
    plan_id: int,
    user_id: UUID = Depends(get_current_user),
    service: BudgetPlanningService = Depends(get_budget_planning_service),
):
    plan = service.get_budget_plan(plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan de presupuesto no encontrado")

    if plan.user_id != user_id:
        logger.warning("Usuario %s sin acceso al plan de presupuesto %s", user_id, plan_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="No autorizado")
    return plan
