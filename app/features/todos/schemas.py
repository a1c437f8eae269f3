"""
➡️ But : Définir les formats d’entrée/sortie de l’API todos (couche validation).

TodoCreate → corps de requête POST

TodoUpdate → corps PUT (mise à jour partielle)

TodoOut → réponse de l’API

La présence de `task` n'est pas exigée ici : c'est le service qui répond
400 "Task is required", avec un message lisible par le front.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    task: Optional[str] = Field(None, examples=["Acheter du lait"])


class TodoUpdate(BaseModel):
    task: Optional[str] = Field(None, examples=["Aller courir"])
    completed: Optional[bool] = Field(None, examples=[True])


class TodoOut(BaseModel):
    id: int
    task: str
    completed: bool

    model_config = {"from_attributes": True}
