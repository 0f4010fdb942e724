"""
Définition SQLAlchemy Core de la table students.
Les noms de colonnes suivent le schéma historique (firstName, lastName).
"""

from sqlalchemy import CHAR, Column, Date, Integer, Table

from labdb.database import metadata

TABLE_NAME = "students"

students = Table(
    TABLE_NAME,
    metadata,
    Column("id", Integer, primary_key=True, nullable=False, autoincrement=False),
    Column("firstName", CHAR(40)),
    Column("lastName", CHAR(40)),
    Column("birthday", Date, nullable=True),
)
