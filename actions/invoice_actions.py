# actions/invoice_actions.py
"""
Write side of the dashboard: validate an untrusted form map, issue one
statement, and report the outcome as an ActionState instead of raising.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import settings
from database.models import Invoice

logger = logging.getLogger("actions.invoices")

Invalidate = Callable[[str], None]

MAX_AMOUNT = 21474836.47


class InvoiceForm(BaseModel):
    # id and date are assigned by the server; anything else the client sends is dropped
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    customer_id: str = Field(alias="customerId", min_length=1)
    # cents must fit the 32-bit amount column
    amount: float = Field(allow_inf_nan=False, ge=-MAX_AMOUNT, le=MAX_AMOUNT)
    status: Literal["pending", "paid"]


class ActionState(BaseModel):
    ok: bool = False
    message: Optional[str] = None
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    redirect_to: Optional[str] = None
    invoice_id: Optional[str] = None


def to_cents(amount: float) -> int:
    return int(round(amount * 100))


def _field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        errors.setdefault(field, []).append(error["msg"])
    return errors


def _parse_form(form: Mapping[str, Any]) -> InvoiceForm:
    return InvoiceForm.model_validate(dict(form))


def _revalidate(invalidate: Optional[Invalidate], scope: str) -> None:
    if invalidate is not None:
        invalidate(scope)


def create_invoice(db: Session, form: Mapping[str, Any], invalidate: Optional[Invalidate] = None) -> ActionState:
    try:
        data = _parse_form(form)
    except ValidationError as e:
        return ActionState(message="Missing Fields. Failed to Create Invoice.", errors=_field_errors(e))

    invoice = Invoice(
        customer_id=data.customer_id,
        amount=to_cents(data.amount),
        status=data.status,
        date=datetime.now(timezone.utc).date(),
    )

    try:
        db.add(invoice)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database Error: failed to create invoice for customer %s", data.customer_id)
        return ActionState(message="Database Error: Failed to Create Invoice.")

    logger.info("Created invoice %s", invoice.id)
    _revalidate(invalidate, settings.INVOICES_PATH)
    return ActionState(ok=True, message="Created Invoice.", redirect_to=settings.INVOICES_PATH, invoice_id=invoice.id)


def update_invoice(
    db: Session, invoice_id: str, form: Mapping[str, Any], invalidate: Optional[Invalidate] = None
) -> ActionState:
    try:
        data = _parse_form(form)
    except ValidationError as e:
        return ActionState(message="Missing Fields. Failed to Update Invoice.", errors=_field_errors(e))

    try:
        updated = (
            db.query(Invoice)
            .filter(Invoice.id == invoice_id)
            .update(
                {
                    Invoice.customer_id: data.customer_id,
                    Invoice.amount: to_cents(data.amount),
                    Invoice.status: data.status,
                },
                synchronize_session=False,
            )
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database Error: failed to update invoice %s", invoice_id)
        return ActionState(message="Database Error: Failed to Update Invoice.")

    if not updated:
        logger.info("Update matched no invoice with id %s", invoice_id)
    _revalidate(invalidate, settings.INVOICES_PATH)
    return ActionState(ok=True, message="Updated Invoice.", redirect_to=settings.INVOICES_PATH, invoice_id=invoice_id)


def delete_invoice(
    db: Session, invoice_id: str, invalidate: Optional[Invalidate] = None, enabled: Optional[bool] = None
) -> ActionState:
    """
    Deletion is switched off unless ALLOW_INVOICE_DELETION is set (or `enabled`
    is passed). While off, every call fails before the database is touched.
    """
    if enabled is None:
        enabled = settings.ALLOW_INVOICE_DELETION
    if not enabled:
        logger.warning("Refusing to delete invoice %s: deletion is disabled", invoice_id)
        return ActionState(message="Failed to Delete Invoice")

    try:
        db.query(Invoice).filter(Invoice.id == invoice_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database Error: failed to delete invoice %s", invoice_id)
        return ActionState(message="Database Error: Failed to Delete Invoice.")

    _revalidate(invalidate, settings.INVOICES_PATH)
    return ActionState(ok=True, message="Deleted Invoice.", invoice_id=invoice_id)
