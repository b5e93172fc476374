"""
ORM models. Importing this package registers every table with Base.metadata
(the seed command, create_tables() and Alembic rely on that).
"""

from camp_api.models.campsite import Campsite
from camp_api.models.camper import Camper

__all__ = ["Campsite", "Camper"]
