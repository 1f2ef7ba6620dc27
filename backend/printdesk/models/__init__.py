"""
Table classes

- Order: customer jobs
- Colour: catalog colours
- Filament: spools with capacity and cumulative usage
"""
from printdesk.models.order import Order
from printdesk.models.colour import Colour
from printdesk.models.filament import Filament

__all__ = ["Order", "Colour", "Filament"]
