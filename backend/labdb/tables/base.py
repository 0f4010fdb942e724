"""
Contrat générique d'accès à une table.

Chaque table concrète lie ces opérations à une connexion SQLAlchemy prêtée
par l'appelant. La table ne ferme jamais la connexion.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from sqlalchemy.engine import Connection

T = TypeVar("T")
K = TypeVar("K")


class TableAccessError(Exception):
    """Erreur interne fatale : une opération d'écriture a échoué côté base."""
    pass


class Table(ABC, Generic[T, K]):
    """Opérations communes à toutes les tables, paramétrées par entité T et clé K."""

    def __init__(self, connection: Connection):
        if connection is None:
            raise ValueError("Une connexion ouverte est requise.")
        self.connection = connection

    @abstractmethod
    def get_table_name(self) -> str:
        """Nom fixe de la table sous-jacente."""

    @abstractmethod
    def create_table(self) -> bool:
        """Crée la table. False en cas d'échec, y compris si elle existe déjà."""

    @abstractmethod
    def drop_table(self) -> bool:
        """Supprime la table."""

    @abstractmethod
    def find_by_primary_key(self, key: K) -> Optional[T]:
        """Retourne la ligne de clé `key`, ou None si absente ou en cas d'échec."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Retourne toutes les lignes, dans l'ordre de la base."""

    @abstractmethod
    def save(self, entity: T) -> bool:
        """Insère une nouvelle ligne. False si la clé existe déjà."""

    @abstractmethod
    def update(self, entity: T) -> bool:
        """Met à jour les champs non-clés. True si au moins une ligne a changé."""

    @abstractmethod
    def delete(self, key: K) -> bool:
        """Supprime la ligne de clé `key`. True si au moins une ligne a été supprimée."""
