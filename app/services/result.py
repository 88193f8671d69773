# app/services/result.py

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from app.models.enums import ValidationStatus

T = TypeVar("T")

@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Resultado de una operación de negocio: o trae el valor (status=success)
    o solo el motivo del rechazo. En un rechazo `value` siempre es None.

    Se puede desempaquetar como tupla: `value, status = result`.
    """
    status: ValidationStatus
    value: Optional[T] = None

    @classmethod
    def ok(cls, value: T) -> "ServiceResult[T]":
        return cls(status=ValidationStatus.success, value=value)

    @classmethod
    def rejected(cls, status: ValidationStatus) -> "ServiceResult[T]":
        if status == ValidationStatus.success:
            raise ValueError("Un rechazo no puede tener status 'success'")
        return cls(status=status)

    @property
    def is_success(self) -> bool:
        return self.status == ValidationStatus.success

    def __iter__(self) -> Iterator:
        yield self.value
        yield self.status
