"""
Colour model
"""
from sqlalchemy import Column, Integer, String

from printdesk.db.base import Base


class Colour(Base):
    """Catalog colour - referenced by name from orders and filaments"""
    __tablename__ = "colours"

    id = Column(Integer, primary_key=True, index=True)
    colour_name = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Colour {self.id}: {self.colour_name}>"
