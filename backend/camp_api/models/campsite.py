"""
Camp API Backend: Campsite SQLAlchemy Model
============================================

What:  ORM model for the `campsites` table, the parent grouping of campers.
Who:   Referenced by Camper.campsite_id; listed by GET /api/v1/campsites.

Lifecycle:
    Rows are created and removed by administrative tooling (the seed
    command, migrations, direct SQL). The API only reads them.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from camp_api.database import Base
from camp_api.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from camp_api.models.camper import Camper


class Campsite(TimestampMixin, Base):
    __tablename__ = "campsites"

    # Store-assigned, unique, never changed after insert
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name of the campsite",
    )

    campers: Mapped[List["Camper"]] = relationship(
        back_populates="campsite",
        lazy="raise",  # async sessions cannot lazy-load; fail loudly instead
    )

    def __repr__(self) -> str:
        return f"<Campsite(id={self.id}, name='{self.name}')>"
