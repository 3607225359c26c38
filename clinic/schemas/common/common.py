from pydantic import BaseModel


class CreatedResponse(BaseModel):
    id: int


class OptionItem(BaseModel):
    """An id paired with the label a picker shows for it."""
    id: int
    label: str
