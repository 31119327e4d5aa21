#!/usr/bin/env python3
"""
Script to create the tables and seed the shop row plus a starter service menu
Usage: python seed.py
"""

from sqlalchemy.exc import SQLAlchemyError

from barbershop import models  # noqa: F401
from barbershop.config import SHOP_ADDRESS, SHOP_ID, SHOP_MAP_URL, SHOP_NAME
from barbershop.database import Base, SessionLocal, engine
from barbershop.models import Service, Shop

STARTER_SERVICES = [
    {"name": "Haircut", "price": 300, "category": "Hair", "duration": 30},
    {"name": "Beard Trim", "price": 150, "category": "Beard", "duration": 15},
    {"name": "Haircut + Beard", "price": 400, "category": "Combo", "duration": 45},
    {"name": "Hair Spa", "price": 700, "category": "Care", "duration": 60},
]


def seed():
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()

    try:
        print("🔍 Seeding shop data...\n")

        if db.query(Shop).filter(Shop.id == SHOP_ID).first():
            print(f"   - Shop {SHOP_ID} already exists")
        else:
            db.add(
                Shop(
                    id=SHOP_ID,
                    name=SHOP_NAME,
                    address=SHOP_ADDRESS,
                    map_url=SHOP_MAP_URL,
                    opening_time="10:00",
                    closing_time="21:00",
                )
            )
            print(f"   ✅ Shop '{SHOP_NAME}' created")

        for data in STARTER_SERVICES:
            if db.query(Service).filter(Service.name == data["name"]).first():
                print(f"   - Service '{data['name']}' already exists")
                continue
            db.add(Service(shop_id=SHOP_ID, **data))
            print(f"   ✅ Service '{data['name']}' added")

        db.commit()
        print(f"\n✅ Seed completed: {db.query(Service).count()} services")
    except SQLAlchemyError as e:
        print(f"❌ Error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
