"""
Camp API Backend: Camper SQLAlchemy Model
==========================================

What:  ORM model for the `campers` table.
Who:   Read by CollectionService for GET /api/v1/campers; written only by
       the seed command and administrative tooling.

Columns:
    - id:           integer primary key assigned by the store, immutable
    - name:         free text
    - campsite_id:  FK to campsites.id; integrity enforced by the database
    - created_at / updated_at: store-populated (TimestampMixin), never
      exposed by the v1 serializer

Index on campsite_id:
    Supports "campers at campsite X" joins and keeps FK checks on
    campsite deletes from scanning the whole table.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from camp_api.database import Base
from camp_api.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from camp_api.models.campsite import Campsite


class Camper(TimestampMixin, Base):
    __tablename__ = "campers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Camper's display name",
    )

    campsite_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("campsites.id"),
        nullable=False,
        index=True,
        comment="Campsite this camper belongs to",
    )

    campsite: Mapped["Campsite"] = relationship(
        back_populates="campers",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return (
            f"<Camper(id={self.id}, name='{self.name}', "
            f"campsite_id={self.campsite_id})>"
        )
