"""
Configuration centrale de labdb via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données (SQLite local par défaut, toute URL SQLAlchemy 2.x acceptée)
    DATABASE_URL: str = "sqlite:///./students.db"

    # Variante de la table students : "complete" ou "incomplete" (cible de fidélité aux défauts)
    STUDENTS_TABLE_VARIANT: Literal["complete", "incomplete"] = "complete"

    # Environnement
    ENV: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
