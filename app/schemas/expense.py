import datetime as dt
from pydantic import BaseModel, ConfigDict

class ExpenseCreate(BaseModel):
    title: str
    amount: float
    date: dt.date
    is_recurring: bool = False

class ExpenseRead(ExpenseCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
