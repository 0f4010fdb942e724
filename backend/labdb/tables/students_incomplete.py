"""
Variante incomplète de la table students, conservée comme cible de fidélité aux défauts.

Différences avec StudentsTable :
- find_by_primary_key / find_by_birthday : texte SQL mal formé, échouent à chaque appel ;
- save : l'élève est concaténé tel quel dans la requête, sans paramètres ;
- delete : exécute un SELECT et retourne toujours True ;
- update : non supporté (NotImplementedError).

À ne sélectionner que via STUDENTS_TABLE_VARIANT="incomplete".
"""

import datetime as dt
import logging
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from labdb.models.student import TABLE_NAME
from labdb.schemas.student import Student
from labdb.tables.students import StudentsTable

logger = logging.getLogger(__name__)


class IncompleteStudentsTable(StudentsTable):

    def find_by_primary_key(self, key: int) -> Optional[Student]:
        # Espace manquant avant WHERE
        query = text("SELECT * FROM " + TABLE_NAME + "wHERE id = :id")
        found = self._query(query, {"id": key})
        return found[0] if found else None

    def find_by_birthday(self, day: Optional[dt.date]) -> List[Student]:
        query = text("SELECT * FROM " + TABLE_NAME + "WHERE date = :day")
        return self._query(query, {"day": day.isoformat() if day else None})

    def save(self, student: Student) -> bool:
        query = "INSERT INTO " + TABLE_NAME + " VALUES " + str(student)
        try:
            with self.connection.exec_driver_sql(query):
                pass
        except SQLAlchemyError as exc:
            raise self._fatal("save", exc) from exc
        return True

    def delete(self, key: int) -> bool:
        self._query(text("SELECT * FROM " + TABLE_NAME + " WHERE id = :id"), {"id": key})
        return True

    def update(self, student: Student) -> bool:
        raise NotImplementedError("update n'est pas supporté par la variante incomplète.")
