"""
Connexion à la base de données via SQLAlchemy Core.
Le moteur est en AUTOCOMMIT : les objets d'accès aux tables n'ouvrent jamais de transaction.
"""

from sqlalchemy import MetaData, create_engine

from labdb.config import settings

engine = create_engine(settings.DATABASE_URL, isolation_level="AUTOCOMMIT")

metadata = MetaData()


def get_db():
    """Dépendance FastAPI : prête une connexion et la ferme après usage."""
    with engine.connect() as connection:
        yield connection
