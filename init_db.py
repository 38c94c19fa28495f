# init_db.py
import logging

from api.auth import get_password_hash
from database import placeholder_data
from database.db_session import SessionLocal, init_db
from database.models import Customer, Invoice, Revenue, User

logger = logging.getLogger("init_db")


def seed(db):
    """Load placeholder rows unless the database already has customers."""
    if db.query(Customer).first() is not None:
        logger.info("Database already seeded, skipping")
        return False

    db.add_all(
        User(id=u["id"], name=u["name"], email=u["email"], password=get_password_hash(u["password"]))
        for u in placeholder_data.users
    )
    db.add_all(Customer(**c) for c in placeholder_data.customers)
    db.flush()

    db.add_all(
        Invoice(
            customer_id=placeholder_data.customers[i["customer"]]["id"],
            amount=i["amount"],
            status=i["status"],
            date=i["date"],
        )
        for i in placeholder_data.invoices
    )
    db.add_all(Revenue(**r) for r in placeholder_data.revenue)
    db.commit()
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    session = SessionLocal()
    try:
        seeded = seed(session)
    finally:
        session.close()
    print("DB tables created" + (" and seeded" if seeded else ""))
