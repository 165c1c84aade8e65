# workforce_planner/api/customers.py

from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ..database import get_session
from ..models.customer import Customer, CustomerProductMix
from ..services.customer_config import to_customer_config
from ..services.customer_stats import customer_order_stats

router = APIRouter(prefix="/api/customers", tags=["customers"])


def _get_customer(session: Session, customer_id: str) -> Customer:
    customer = session.get(Customer, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")
    return customer


@router.get("")
def list_customers(session: Session = Depends(get_session)):
    customers = session.exec(select(Customer).order_by(Customer.code)).all()
    return {"customers": customers}


@router.get("/{customer_id}")
def get_customer(customer_id: str, session: Session = Depends(get_session)):
    customer = _get_customer(session, customer_id)
    mix = session.exec(
        select(CustomerProductMix).where(CustomerProductMix.customer_id == customer_id)
    ).all()
    return {"customer": customer, "product_mix": mix}


@router.get("/{customer_id}/config")
def get_customer_config(customer_id: str, session: Session = Depends(get_session)):
    """Operations rules and product mix exactly as the calculation sees them."""
    customer = _get_customer(session, customer_id)
    return asdict(to_customer_config(session, customer))


@router.get("/{customer_id}/stats")
def get_customer_stats(customer_id: str, session: Session = Depends(get_session)):
    _get_customer(session, customer_id)
    return {"stats": customer_order_stats(session, customer_id, date.today())}
