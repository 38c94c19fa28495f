import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from actions.invoice_actions import ActionState, create_invoice, delete_invoice, update_invoice
from api.auth import get_current_user
from database import queries
from database.db_session import get_db
from formatting import generate_pagination
from settings import INVOICES_PATH

# Logging
logger = logging.getLogger("api.invoices")
router = APIRouter(prefix=INVOICES_PATH, tags=["invoices"])


def revalidate_path(scope: str) -> None:
    # listings are read fresh on every request, nothing is held to evict
    logger.info("Revalidating %s", scope)


def action_response(state: ActionState):
    if state.ok and state.redirect_to:
        return RedirectResponse(state.redirect_to, status_code=303)
    if state.ok:
        return JSONResponse(state.model_dump())
    status_code = 422 if state.errors else 500
    return JSONResponse(state.model_dump(), status_code=status_code)


@router.get("")
def list_invoices(
    query: str = "",
    page: int = Query(1, ge=1),
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    invoices = queries.fetch_filtered_invoices(db, query, page)
    total_pages = queries.fetch_invoices_pages(db, query)
    return {
        "invoices": invoices,
        "total_pages": total_pages,
        "pagination": generate_pagination(page, total_pages),
    }


@router.get("/pages")
def invoice_pages(query: str = "", db: Session = Depends(get_db), user=Depends(get_current_user)):
    return {"total_pages": queries.fetch_invoices_pages(db, query)}


@router.get("/{invoice_id}")
def get_invoice(invoice_id: str, db: Session = Depends(get_db), user=Depends(get_current_user)):
    invoice = queries.fetch_invoice_by_id(db, invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


async def form_fields(request: Request) -> Dict[str, Any]:
    # read the body on the event loop; the routes below run in the threadpool
    form = await request.form()
    return dict(form)


@router.post("")
def create(
    form: Dict[str, Any] = Depends(form_fields),
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    state = create_invoice(db, form, invalidate=revalidate_path)
    return action_response(state)


@router.put("/{invoice_id}")
def update(
    invoice_id: str,
    form: Dict[str, Any] = Depends(form_fields),
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    state = update_invoice(db, invoice_id, form, invalidate=revalidate_path)
    return action_response(state)


@router.delete("/{invoice_id}")
def delete(invoice_id: str, db: Session = Depends(get_db), user=Depends(get_current_user)):
    state = delete_invoice(db, invoice_id, invalidate=revalidate_path)
    return action_response(state)
