"""
Filament model

A spool of print material. Order saves that record usage bump amount_used.
"""
from sqlalchemy import Column, Integer, String, Float, Date

from printdesk.db.base import Base


class Filament(Base):
    """Filament spool - matches filaments table"""
    __tablename__ = "filaments"

    id = Column(Integer, primary_key=True, index=True)

    size = Column(Float, nullable=False, default=0)  # Total weight on the spool
    amount_used = Column(Float, nullable=False, default=0)  # Cumulative weight consumed
    date_of_addition = Column(Date, nullable=True)

    material = Column(String(50), nullable=True)  # PLA, PETG, ...
    colour_name = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<Filament {self.id}: {self.material} {self.colour_name}>"
