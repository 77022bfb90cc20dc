from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON uses camelCase, snake_case is accepted on input too
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ScheduleBase(CamelModel):
    name: str
    description: str
    category: str  # academic / work / personal / fitness / social
    color: str
    is_active: bool = True


class ScheduleCreate(ScheduleBase):
    pass


class ScheduleUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None


class ScheduleOut(ScheduleBase):
    id: str
    created_at: datetime
    updated_at: datetime
