# api/customer_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.auth import get_current_user
from database import queries
from database.db_session import get_db

router = APIRouter(prefix="/dashboard/customers", tags=["customers"])


@router.get("", summary="Customers matching a name or email search, with invoice totals")
def list_customers(query: str = "", db: Session = Depends(get_db), user=Depends(get_current_user)):
    return {"customers": queries.fetch_filtered_customers(db, query)}


@router.get("/options", summary="All customers as id/name pairs for the invoice form")
def customer_options(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return {"customers": queries.fetch_customers(db)}
