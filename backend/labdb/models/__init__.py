# Importe toutes les tables pour les enregistrer dans metadata.
from labdb.models.student import students  # noqa: F401
