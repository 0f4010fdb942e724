"""
Router pour les élèves, adossé à la table students.
Lecture     : GET /api/v1/students, GET /api/v1/students/{id}, GET /api/v1/students/birthday/{day}
Création    : POST /api/v1/students
Mise à jour : PUT /api/v1/students/{id}
Suppression : DELETE /api/v1/students/{id}
"""

import datetime as dt
from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.engine import Connection

from labdb.database import get_db
from labdb.schemas.student import ID_MAX, ID_MIN, Student, StudentCreate, StudentUpdate
from labdb.tables import StudentsTable, make_students_table

router = APIRouter(prefix="/api/v1/students", tags=["Élèves"])

# Identifiant borné à un INTEGER 64 bits : hors bornes, 422 avant tout accès base
StudentId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]


def get_students_table(connection: Connection = Depends(get_db)) -> StudentsTable:
    """Dépendance FastAPI : table students liée à la connexion de la requête."""
    return make_students_table(connection)


@router.get("", response_model=List[Student], summary="Lister tous les élèves")
def list_students(table: StudentsTable = Depends(get_students_table)):
    """Retourne tous les élèves dans l'ordre de la base."""
    return table.find_all()


@router.get("/birthday/{day}", response_model=List[Student], summary="Élèves nés un jour donné")
def list_students_by_birthday(day: dt.date, table: StudentsTable = Depends(get_students_table)):
    return table.find_by_birthday(day)


@router.get("/{student_id}", response_model=Student, summary="Détail d'un élève")
def get_student(student_id: StudentId, table: StudentsTable = Depends(get_students_table)):
    student = table.find_by_primary_key(student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return student


@router.post("", response_model=Student, status_code=201, summary="Créer un élève")
def create_student(data: StudentCreate, table: StudentsTable = Depends(get_students_table)):
    """Insère un élève. 409 si l'identifiant existe déjà."""
    student = data.to_entity()
    if not table.save(student):
        raise HTTPException(status_code=409, detail=f"Un élève avec l'identifiant {student.id} existe déjà.")
    return student


@router.put("/{student_id}", response_model=Student, summary="Modifier un élève")
def update_student(student_id: StudentId, data: StudentUpdate, table: StudentsTable = Depends(get_students_table)):
    """Remplace les champs non-clés d'un élève. L'identifiant ne change jamais."""
    student = data.to_entity(student_id)
    try:
        updated = table.update(student)
    except NotImplementedError:
        raise HTTPException(status_code=501, detail="Mise à jour non supportée par cette variante.")
    if not updated:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return student


@router.delete("/{student_id}", status_code=204, summary="Supprimer un élève")
def delete_student(student_id: StudentId, table: StudentsTable = Depends(get_students_table)):
    if not table.delete(student_id):
        raise HTTPException(status_code=404, detail="Élève introuvable.")
