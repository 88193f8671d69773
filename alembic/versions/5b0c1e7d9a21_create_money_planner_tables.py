"""create money planner tables

Revision ID: 5b0c1e7d9a21
Revises:
Create Date: 2025-07-10 19:42:08.512309

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b0c1e7d9a21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema: usuarios, ingresos, gastos, análisis y planes."""
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_user_username', 'user', ['username'], unique=True)

    for table in ('income', 'expense'):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
            sa.Column('title', sa.String(length=50), nullable=False),
            sa.Column('amount', sa.Float(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('is_recurring', sa.Boolean(), nullable=False, server_default=sa.false()),
        )
        op.create_index(f'ix_{table}_user_id', table, ['user_id'])

    op.create_table(
        'month_analysis',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('month', sa.Integer(), nullable=False),
        sa.Column('summary_amount', sa.Float(), nullable=False),
        sa.UniqueConstraint('user_id', 'year', 'month', name='uq_month_analysis_user_year_month'),
    )
    op.create_index('ix_month_analysis_user_id', 'month_analysis', ['user_id'])

    op.create_table(
        'month_analysis_income',
        sa.Column('month_analysis_id', sa.Integer(), sa.ForeignKey('month_analysis.id'), primary_key=True),
        sa.Column('income_id', sa.Integer(), sa.ForeignKey('income.id'), primary_key=True),
    )
    op.create_table(
        'month_analysis_expense',
        sa.Column('month_analysis_id', sa.Integer(), sa.ForeignKey('month_analysis.id'), primary_key=True),
        sa.Column('expense_id', sa.Integer(), sa.ForeignKey('expense.id'), primary_key=True),
    )

    op.create_table(
        'budget_plan',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False, unique=True),
        sa.Column('summary_amount', sa.Float(), nullable=False),
    )
    op.create_table(
        'budget_plan_item',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('budget_plan_id', sa.Integer(), sa.ForeignKey('budget_plan.id'), nullable=True),
        sa.Column('title', sa.String(length=50), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('is_income', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_budget_plan_item_budget_plan_id', 'budget_plan_item', ['budget_plan_id'])


def downgrade() -> None:
    """Downgrade schema: elimina todas las tablas."""
    op.drop_index('ix_budget_plan_item_budget_plan_id', table_name='budget_plan_item')
    op.drop_table('budget_plan_item')
    op.drop_table('budget_plan')
    op.drop_table('month_analysis_expense')
    op.drop_table('month_analysis_income')
    op.drop_index('ix_month_analysis_user_id', table_name='month_analysis')
    op.drop_table('month_analysis')
    for table in ('expense', 'income'):
        op.drop_index(f'ix_{table}_user_id', table_name=table)
        op.drop_table(table)
    op.drop_index('ix_user_username', table_name='user')
    op.drop_table('user')
