from typing import Optional

from sqlalchemy.engine import Connection

from labdb.config import settings
from labdb.tables.base import Table, TableAccessError  # noqa: F401
from labdb.tables.students import StudentsTable
from labdb.tables.students_incomplete import IncompleteStudentsTable

VARIANTS = {
    "complete": StudentsTable,
    "incomplete": IncompleteStudentsTable,
}


def make_students_table(connection: Connection, variant: Optional[str] = None) -> StudentsTable:
    """Construit la table students dans la variante configurée (une seule par déploiement)."""
    variant = variant or settings.STUDENTS_TABLE_VARIANT
    if variant not in VARIANTS:
        raise ValueError(f"Variante inconnue : {variant}. Valeurs acceptées : {sorted(VARIANTS)}")
    return VARIANTS[variant](connection)
