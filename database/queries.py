# database/queries.py
"""
Read side of the dashboard: every function takes the request's Session,
issues its statements one after another, and shapes rows into plain dicts.
Any SQLAlchemy failure is logged and re-raised as DatabaseError.
"""

import logging
import math
from typing import Any, Dict, List, Optional

from sqlalchemy import String, case, cast, func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.errors import DatabaseError
from database.models import Customer, Invoice, Revenue, User
from formatting import format_currency

logger = logging.getLogger("database.queries")

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _month_index(month: str) -> int:
    try:
        return MONTHS.index(month)
    except ValueError:
        return len(MONTHS)


def _invoice_search(query: str):
    pattern = f"%{query}%"
    return or_(
        Customer.name.ilike(pattern),
        Customer.email.ilike(pattern),
        cast(Invoice.amount, String).ilike(pattern),
        cast(Invoice.date, String).ilike(pattern),
        Invoice.status.ilike(pattern),
    )


def fetch_revenue(db: Session) -> List[Dict[str, Any]]:
    try:
        logger.info("Fetching revenue data...")
        rows = db.query(Revenue.month, Revenue.revenue).all()
    except SQLAlchemyError as e:
        logger.exception("Database Error")
        raise DatabaseError("Failed to fetch revenue data.") from e

    rows = sorted(rows, key=lambda r: _month_index(r.month))
    return [{"month": r.month, "revenue": r.revenue} for r in rows]


def fetch_latest_invoices(db: Session) -> List[Dict[str, Any]]:
    try:
        rows = (
            db.query(Invoice.amount, Customer.name, Customer.image_url, Customer.email, Invoice.id)
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(LATEST_INVOICES_LIMIT)
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Database Error")
        raise DatabaseError("Failed to fetch the latest invoices.") from e

    latest = []
    for r in rows:
        invoice = r._asdict()
        invoice["amount"] = format_currency(r.amount)
        latest.append(invoice)
    return latest


def fetch_card_data(db: Session) -> Dict[str, Any]:
    """
    Summary cards for the dashboard. The three figures come from
    three separate statements, issued in order.
    """
    try:
        number_of_invoices = db.query(func.count(Invoice.id)).scalar()
        number_of_customers = db.query(func.count(Customer.id)).scalar()
        paid, pending = db.query(
            func.sum(case((Invoice.status == "paid", Invoice.amount), else_=0)),
            func.sum(case((Invoice.status == "pending", Invoice.amount), else_=0)),
        ).one()
    except SQLAlchemyError as e:
        logger.exception("Database Error")
        raise DatabaseError("Failed to fetch card data.") from e

    return {
        "number_of_invoices": number_of_invoices or 0,
        "number_of_customers": number_of_customers or 0,
        "total_paid_invoices": format_currency(paid or 0),
        "total_pending_invoices": format_currency(pending or 0),
    }


def fetch_filtered_invoices(db: Session, query: str, current_page: int) -> List[Dict[str, Any]]:
    offset = (max(current_page, 1) - 1) * ITEMS_PER_PAGE

    try:
        rows = (
            db.query(
                Invoice.id,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .filter(_invoice_search(query))
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(ITEMS_PER_PAGE)
            .offset(offset)
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Database Error")
        raise DatabaseError("Failed to fetch invoices.") from e

    return [r._asdict() for r in rows]


def fetch_invoices_pages(db: Session, query: str) -> int:
    try:
        count = (
            db.query(func.count(Invoice.id))
            .join(Customer, Invoice.customer_id == Customer.id)
            .filter(_invoice_search(query))
            .scalar()
        )
    except SQLAlchemyError as e:
        logger.exception("Database Error")
        raise DatabaseError("Failed to fetch total number of invoices.") from e

    return math.ceil(int(count or 0) / ITEMS_PER_PAGE)


def fetch_invoice_by_id(db: Session, invoice_id: str) -> Optional[Dict[str, Any]]:
    try:
        row = (
            db.query(Invoice.id, Invoice.customer_id, Invoice.amount, Invoice.status)
            .filter(Invoice.id == invoice_id)
            .first()
        )
    except SQLAlchemyError as e:
        logger.exception("Database Error")
        raise DatabaseError("Failed to fetch invoice.") from e

    if row is None:
        return None
    invoice = row._asdict()
    # cents -> dollars for the edit form
    invoice["amount"] = row.amount / 100
    return invoice


def fetch_customers(db: Session) -> List[Dict[str, Any]]:
    try:
        rows = db.query(Customer.id, Customer.name).order_by(Customer.name.asc()).all()
    except SQLAlchemyError as e:
        logger.exception("Database Error")
        raise DatabaseError("Failed to fetch all customers.") from e

    return [r._asdict() for r in rows]


def fetch_filtered_customers(db: Session, query: str) -> List[Dict[str, Any]]:
    pattern = f"%{query}%"

    try:
        rows = (
            db.query(
                Customer.id,
                Customer.name,
                Customer.email,
                Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                func.sum(case((Invoice.status == "pending", Invoice.amount), else_=0)).label("total_pending"),
                func.sum(case((Invoice.status == "paid", Invoice.amount), else_=0)).label("total_paid"),
            )
            .outerjoin(Invoice, Customer.id == Invoice.customer_id)
            .filter(or_(Customer.name.ilike(pattern), Customer.email.ilike(pattern)))
            .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
            .order_by(Customer.name.asc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Database Error")
        raise DatabaseError("Failed to fetch customer table.") from e

    customers = []
    for r in rows:
        customer = r._asdict()
        customer["total_pending"] = format_currency(r.total_pending or 0)
        customer["total_paid"] = format_currency(r.total_paid or 0)
        customers.append(customer)
    return customers


def get_user(db: Session, email: str) -> Optional[User]:
    try:
        return db.query(User).filter(User.email == email).first()
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch user")
        raise DatabaseError("Failed to fetch user.") from e
