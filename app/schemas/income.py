import datetime as dt
from pydantic import BaseModel, ConfigDict

class IncomeCreate(BaseModel):
    title: str
    amount: float
    date: dt.date
    is_recurring: bool = False

class IncomeRead(IncomeCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
