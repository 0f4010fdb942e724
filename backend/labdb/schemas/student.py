"""
Schémas Pydantic pour les élèves.

Note : on importe datetime en tant que module (dt) pour rester cohérent avec
les champs de type date des autres schémas.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MAX_LENGTH = 40  # largeur des colonnes CHAR(40)

# Bornes d'un INTEGER 64 bits
ID_MIN = -2**63
ID_MAX = 2**63 - 1


class Student(BaseModel):
    """Une ligne de la table students. Immuable une fois construite."""
    id: int = Field(ge=ID_MIN, le=ID_MAX)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birthday: Optional[dt.date] = None

    model_config = ConfigDict(frozen=True)


def _clean_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    if not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    if len(v.strip()) > NAME_MAX_LENGTH:
        raise ValueError(f"Le champ ne peut pas dépasser {NAME_MAX_LENGTH} caractères.")
    return v.strip()


class StudentCreate(BaseModel):
    """Schéma de création d'un élève (POST /students)."""
    id: int = Field(ge=ID_MIN, le=ID_MAX)
    first_name: str
    last_name: str
    birthday: Optional[dt.date] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _clean_name(v)

    def to_entity(self) -> Student:
        return Student(**self.model_dump())


class StudentUpdate(BaseModel):
    """
    Schéma de mise à jour d'un élève (PUT /students/{id}).
    Remplace tous les champs non-clés : un birthday absent est remis à NULL.
    """
    first_name: str
    last_name: str
    birthday: Optional[dt.date] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _clean_name(v)

    def to_entity(self, student_id: int) -> Student:
        return Student(id=student_id, **self.model_dump())
