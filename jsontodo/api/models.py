from pydantic import BaseModel
from typing import Any


# Field values are checked by the repository, so that a bad value gets a 400 instead of a 422.
class TodoCreate(BaseModel):
    text: Any = None


class TodoUpdate(BaseModel):
    text: Any = None
    completed: Any = None
