from typing import Optional

from pydantic import BaseModel, Field, field_validator

from domain.entities import MAX_NAME_LENGTH, Task


class TaskCreate(BaseModel):
    name: str = Field(..., max_length=MAX_NAME_LENGTH)
    deadline: str = Field(..., pattern=r"^[0-9]{2}-[0-9]{2}-[0-9]{4}$")

    @field_validator("name", "deadline", mode="before")
    @classmethod
    def strip_and_require(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("must not be blank")
        return v


class TaskUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=MAX_NAME_LENGTH)
    deadline: Optional[str] = Field(default=None, pattern=r"^[0-9]{2}-[0-9]{2}-[0-9]{4}$")

    @field_validator("name", "deadline", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # empty means "not provided"
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    def has_any(self) -> bool:
        return self.name is not None or self.deadline is not None


class TaskResponse(BaseModel):
    id: int
    name: str
    deadline: str
    completed: bool

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(id=task.id, name=task.name, deadline=task.deadline_text, completed=task.completed)


class CommandRequest(BaseModel):
    command: str = ""
