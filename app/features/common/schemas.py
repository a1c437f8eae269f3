from pydantic import BaseModel, Field


class MessageOut(BaseModel):
    message: str = Field(..., examples=["Todo deleted successfully"])


class ErrorOut(BaseModel):
    error: str = Field(..., examples=["Todo not found"])
