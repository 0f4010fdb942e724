"""
Accès à la table students (variante complète).

Politique d'erreur :
- lectures (find_*) : un échec base est journalisé et donne None ou [] ;
- create_table : False en cas d'échec ;
- save : False sur doublon de clé primaire ;
- autres écritures : TableAccessError, chaînée à l'exception d'origine.

OverflowError (entier hors INTEGER 64 bits, non enveloppée par SQLAlchemy)
suit la même politique que les erreurs base.
"""

import datetime as dt
import logging
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.schema import CreateTable, DropTable

from labdb.models.student import TABLE_NAME, students
from labdb.schemas.student import Student
from labdb.tables.base import Table, TableAccessError

logger = logging.getLogger(__name__)


class StudentsTable(Table[Student, int]):

    def get_table_name(self) -> str:
        return TABLE_NAME

    def create_table(self) -> bool:
        try:
            with self.connection.execute(CreateTable(students)):
                pass
        except SQLAlchemyError as exc:
            logger.warning("Création de la table %s impossible : %s", TABLE_NAME, exc)
            return False
        logger.info("Table %s créée.", TABLE_NAME)
        return True

    def drop_table(self) -> bool:
        try:
            with self.connection.execute(DropTable(students)):
                pass
        except SQLAlchemyError as exc:
            raise self._fatal("drop_table", exc) from exc
        logger.info("Table %s supprimée.", TABLE_NAME)
        return True

    def find_by_primary_key(self, key: int) -> Optional[Student]:
        found = self._query(select(students).where(students.c.id == key))
        return found[0] if found else None

    def find_all(self) -> List[Student]:
        return self._query(select(students))

    def find_by_birthday(self, day: Optional[dt.date]) -> List[Student]:
        """Retourne les élèves nés le jour `day` (None → élèves sans date de naissance)."""
        return self._query(select(students).where(students.c.birthday == day))

    def save(self, student: Student) -> bool:
        statement = insert(students).values(
            id=student.id,
            firstName=student.first_name,
            lastName=student.last_name,
            birthday=student.birthday,
        )
        try:
            with self.connection.execute(statement):
                pass
        except IntegrityError:
            logger.info("Élève %s déjà présent dans %s.", student.id, TABLE_NAME)
            return False
        except (SQLAlchemyError, OverflowError) as exc:
            raise self._fatal("save", exc) from exc
        return True

    def update(self, student: Student) -> bool:
        statement = (
            update(students)
            .where(students.c.id == student.id)
            .values(
                firstName=student.first_name,
                lastName=student.last_name,
                birthday=student.birthday,
            )
        )
        return self._write("update", statement) > 0

    def delete(self, key: int) -> bool:
        return self._write("delete", delete(students).where(students.c.id == key)) > 0

    # --- Helpers ---

    def _query(self, statement, params: Optional[dict] = None) -> List[Student]:
        """Exécute une lecture. Tout échec, y compris en cours de lecture, donne []."""
        try:
            with self.connection.execute(statement, params) as result:
                return self._read_students(result)
        except (SQLAlchemyError, ValueError, OverflowError) as exc:
            logger.error("Lecture impossible sur %s : %s", TABLE_NAME, exc)
            return []

    def _write(self, operation: str, statement) -> int:
        """Exécute une écriture et retourne le nombre de lignes touchées."""
        try:
            with self.connection.execute(statement) as result:
                return result.rowcount
        except (SQLAlchemyError, OverflowError) as exc:
            raise self._fatal(operation, exc) from exc

    @staticmethod
    def _read_students(result: Result) -> List[Student]:
        """Convertit chaque ligne du résultat en Student."""
        student_list = []
        for row in result:
            values = row._mapping
            student_list.append(Student(
                id=int(values["id"]),
                first_name=_strip_padding(values["firstName"]),
                last_name=_strip_padding(values["lastName"]),
                birthday=_to_date(values["birthday"]),
            ))
        return student_list

    @staticmethod
    def _fatal(operation: str, exc: Exception) -> TableAccessError:
        logger.error("Échec de %s sur %s : %s", operation, TABLE_NAME, exc, exc_info=True)
        return TableAccessError(f"Échec de {operation} sur la table {TABLE_NAME}.")


def _strip_padding(value: Optional[str]) -> Optional[str]:
    # CHAR(40) peut revenir complété par des espaces selon le moteur
    return value.rstrip(" ") if value is not None else None


def _to_date(value) -> Optional[dt.date]:
    """Conversion null-safe : les requêtes textuelles SQLite renvoient la date en texte."""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value))
