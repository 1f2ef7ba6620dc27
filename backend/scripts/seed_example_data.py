"""
Seed Example Data for PrintDesk

This script seeds the database with:
1. The configured colour set
2. One PLA spool per colour
3. A handful of orders spread over the current year

Run with: python backend/scripts/seed_example_data.py
"""
import sys
from pathlib import Path

# Add backend directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from datetime import date, timedelta

from sqlalchemy.orm import Session

from printdesk.core.settings import get_settings
from printdesk.db.session import SessionLocal, init_db
from printdesk.models import Colour, Filament, Order


SPOOL_WEIGHT = 1000.0

EXAMPLE_ORDERS = [
    # nickname, source, colour, status, price, paid, days ago
    ("mare_bella", "instagram", "black", "Sent", 180.0, True, 70),
    ("stable_north", "allegro", "blue", "Finished", 150.0, True, 45),
    ("pony_club", "facebook", "pink", "Printing", 120.0, False, 20),
    ("eq_team", "walk-in", "lavender", "Order", 200.0, False, 6),
    ("new_lead", "instagram", "green", "Contact", 0.0, False, 1),
]


def get_or_create_colour(db: Session, name: str) -> Colour:
    """Get existing colour or create it"""
    colour = db.query(Colour).filter(Colour.colour_name == name).first()
    if not colour:
        colour = Colour(colour_name=name)
        db.add(colour)
        db.commit()
        db.refresh(colour)
    return colour


def get_or_create_spool(db: Session, colour_name: str) -> Filament:
    """One PLA spool per colour"""
    spool = db.query(Filament).filter(Filament.colour_name == colour_name).first()
    if not spool:
        spool = Filament(
            size=SPOOL_WEIGHT,
            amount_used=0,
            date_of_addition=date.today(),
            material="PLA",
            colour_name=colour_name,
        )
        db.add(spool)
        db.commit()
        db.refresh(spool)
    return spool


def seed_orders(db: Session) -> int:
    """Insert the example orders unless orders already exist"""
    if db.query(Order).count():
        print("  Orders already present, skipping")
        return 0

    today = date.today()
    created = 0
    for nickname, source, colour, status, price, paid, days_ago in EXAMPLE_ORDERS:
        spool = db.query(Filament).filter(Filament.colour_name == colour).first()
        used = 0.0 if status == "Contact" else 85.0
        description = ""
        if used and spool:
            spool.amount_used += used
            description = f" Filament used: {spool.material}:{spool.colour_name}:{spool.size:g} (Weight) - {used:g}"

        db.add(Order(
            nickname=nickname,
            source_of_order=source,
            size_x=23, size_y=17, size_z=14,
            color=colour,
            entry="18 standard",
            payment="transfer",
            payment_received=paid,
            discount=0,
            price=price,
            list_price=price,
            date_of_order=today - timedelta(days=days_ago),
            status=status,
            description=description,
            filament_id=spool.id if (used and spool) else None,
            amount_used=used,
        ))
        created += 1
    db.commit()
    return created


def main():
    settings = get_settings()
    init_db()
    db = SessionLocal()
    try:
        print("\nSeeding colours and spools...")
        for name in settings.COLOR_OPTIONS:
            get_or_create_colour(db, name)
            get_or_create_spool(db, name)
            print(f"  {name}")

        print("\nSeeding orders...")
        count = seed_orders(db)
        print(f"  {count} orders created")
    finally:
        db.close()
    print("\nDone.")


if __name__ == "__main__":
    main()
