import argparse
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, select

from stockmetrics.core.logging import setup_logging
from stockmetrics.database import Base, SessionLocal, engine
from stockmetrics.models import Category, Item, Transaction, import_all_models


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample items and stock movements.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def _movement(item, kind, quantity, unit_price, when, party):
    return Transaction(
        item_id=item.id,
        type=kind,
        quantity=quantity,
        unit_price=unit_price,
        total_value=quantity * unit_price,
        created_at=when,
        supplier_customer=party,
    )


def main():
    setup_logging()
    args = parse_args()

    import_all_models()
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(Transaction))
            db.execute(delete(Item))
            db.execute(delete(Category))
            db.commit()

        has_item = db.execute(select(Item.id).limit(1)).first()
        if has_item:
            print("Seed skipped: items already exist.")
            return

        beverages = Category(name="Beverages")
        snacks = Category(name="Snacks")
        db.add_all([beverages, snacks])
        db.flush()

        items = [
            Item(name="Cold Brew 330ml", category_id=beverages.id, reorder_point=24, unit_price=4.5),
            Item(name="Sea Salt Crisps", category_id=snacks.id, reorder_point=10, unit_price=2.0),
            Item(name="Sparkling Water", category_id=beverages.id, reorder_point=12, unit_price=1.2),
        ]
        db.add_all(items)
        db.flush()

        now = datetime.now(timezone.utc)
        movements = [
            _movement(items[0], "stock_in", 120, 2.1, now - timedelta(days=40), "Roastery Co"),
            _movement(items[0], "stock_out", 70, 4.5, now - timedelta(days=12), "Walk-in"),
            _movement(items[0], "stock_in", 48, 2.4, now - timedelta(days=6), "Roastery Co"),
            _movement(items[0], "stock_out", 80, 4.5, now - timedelta(hours=5), "Walk-in"),
            _movement(items[1], "stock_in", 60, 0.9, now - timedelta(days=20), "Crunch Ltd"),
            _movement(items[1], "stock_out", 52, 2.0, now - timedelta(days=2), "Walk-in"),
            _movement(items[2], "stock_in", 36, 0.4, now - timedelta(days=3), "Spring Inc"),
            _movement(items[2], "stock_out", 36, 1.2, now - timedelta(hours=2), "Cafe order"),
        ]
        db.add_all(movements)
        db.commit()
        print("Seed data created.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
