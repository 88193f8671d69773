from app.models.user import User
from app.models.links import MonthAnalysisExpenseLink, MonthAnalysisIncomeLink
from app.models.income import Income
from app.models.expense import Expense
from app.models.month_analysis import MonthAnalysis
from app.models.budget_plan import BudgetPlan, BudgetPlanItem

__all__ = [
    "User",
    "MonthAnalysisIncomeLink",
    "MonthAnalysisExpenseLink",
    "Income",
    "Expense",
    "MonthAnalysis",
    "BudgetPlan",
    "BudgetPlanItem",
]
