from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NoteIn(BaseModel):
    """Corps POST et PUT : PUT remplace title et content (title omis → null)."""
    title: Optional[str] = Field(None, examples=["Courses"])
    content: Optional[str] = Field(None, examples=["Lait, pain, œufs"])


class NoteSummaryOut(BaseModel):
    id: int
    title: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class NoteOut(NoteSummaryOut):
    content: str
