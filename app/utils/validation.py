# app/utils/validation.py

from typing import Optional

from app.models.enums import ValidationStatus

MIN_TITLE_LENGTH = 2
MAX_TITLE_LENGTH = 50
MIN_AMOUNT = 1
MAX_AMOUNT = 10_000_000
MIN_PASSWORD_LENGTH = 8

def is_valid_length(title: Optional[str]) -> bool:
    if not title:
        return False
    return MIN_TITLE_LENGTH <= len(title) <= MAX_TITLE_LENGTH

def is_valid_amount(amount: float) -> bool:
    # NaN no cumple ninguna comparación, así que también queda rechazado
    return MIN_AMOUNT <= amount <= MAX_AMOUNT

def is_valid_password(password: Optional[str]) -> bool:
    """
    Mínimo 8 caracteres, con al menos un número, una mayúscula y una minúscula.
    """
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return False
    return (
        any(c.isdigit() for c in password)
        and any(c.isupper() for c in password)
        and any(c.islower() for c in password)
    )


def validate_item(title: Optional[str], amount: float) -> ValidationStatus:
    """Primero el título, luego el monto."""
    if not is_valid_length(title):
        return ValidationStatus.invalid_amount_of_characters
    if not is_valid_amount(amount):
        return ValidationStatus.invalid_amount
    return ValidationStatus.success
