# app/services/records.py

import logging
from typing import List, Optional, Type
from uuid import UUID

from app.models.enums import ValidationStatus
from app.models.income import Income
from app.repositories.record_store import Record, RecordStore
from app.services.result import ServiceResult
from app.utils.validation import validate_item

logger = logging.getLogger(__name__)


class RecordService:
    """CRUD de ingresos y gastos con las mismas reglas de título y monto que el presupuesto."""

    def __init__(self, store: RecordStore):
        self.store = store

    def create_record(self, record: Record, user_id: UUID) -> ServiceResult[Record]:
        user = self.store.find_user(user_id)
        if not user:
            return ServiceResult.rejected(ValidationStatus.not_found)

        status = validate_item(record.title, record.amount)
        if status != ValidationStatus.success:
            logger.warning("%s rechazado para el usuario %s: %s", type(record).__name__, user.id, status.value)
            return ServiceResult.rejected(status)

        record.user_id = user.id
        self.store.insert_record(record)
        self.store.commit()
        self.store.refresh(record)
        logger.info("%s %s creado (usuario %s)", type(record).__name__, record.id, user.id)
        return ServiceResult.ok(record)

    def get_record(self, model: Type[Record], record_id: int) -> Optional[Record]:
        return self.store.get_record(model, record_id)

    def list_records(
        self,
        model: Type[Record],
        user_id: UUID,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> List[Record]:
        if model is Income:
            return self.store.list_incomes(user_id, year, month)
        return self.store.list_expenses(user_id, year, month)

    def update_record(self, record: Record, changes: dict) -> ServiceResult[Record]:
        status = validate_item(changes.get("title", record.title), changes.get("amount", record.amount))
        if status != ValidationStatus.success:
            return ServiceResult.rejected(status)

        for field, value in changes.items():
            setattr(record, field, value)
        self.store.insert_record(record)
        self.store.commit()
        self.store.refresh(record)
        return ServiceResult.ok(record)

    def delete_record(self, record: Record) -> None:
        self.store.delete_record(record)
        self.store.commit()
