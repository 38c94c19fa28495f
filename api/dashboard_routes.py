# api/dashboard_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.auth import get_current_user
from database import queries
from database.db_session import get_db

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/revenue", summary="Monthly revenue for the chart")
def revenue(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return {"revenue": queries.fetch_revenue(db)}


@router.get("/latest-invoices", summary="Five most recent invoices")
def latest_invoices(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return {"invoices": queries.fetch_latest_invoices(db)}


@router.get("/cards", summary="Invoice and customer counts, paid and pending totals")
def cards(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return queries.fetch_card_data(db)
