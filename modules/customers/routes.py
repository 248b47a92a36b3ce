"""
Customer API endpoints.

Staff and admins manage every customer; a customer may read and update
only their own record.
"""

from fastapi import APIRouter, Depends, HTTPException, Path

from api.dependencies import get_customer_service
from api.middleware.auth import RequireAdmin, RequireStaff, allow_self_or_role
from shared.models import Role

from .exceptions import CustomerNotFoundError
from .interfaces import ICustomerService
from .models import Customer, CustomerCreate, CustomerUpdate

router = APIRouter()

SelfOrStaff = Depends(
    allow_self_or_role(Role.CUSTOMER, Role.STAFF, Role.ADMIN, param="customer_id")
)


@router.get("", response_model=list[Customer], dependencies=[RequireStaff])
async def list_customers(
    service: ICustomerService = Depends(get_customer_service),
) -> list[Customer]:
    """List all customers by id."""
    return await service.list_customers()


@router.get("/{customer_id}", response_model=Customer, dependencies=[SelfOrStaff])
async def get_customer(
    customer_id: int = Path(..., gt=0),
    service: ICustomerService = Depends(get_customer_service),
) -> Customer:
    try:
        return await service.get_customer(customer_id)
    except CustomerNotFoundError:
        raise HTTPException(status_code=404, detail="Customer not found")


@router.post("", response_model=Customer, status_code=201, dependencies=[RequireStaff])
async def create_customer(
    request: CustomerCreate,
    service: ICustomerService = Depends(get_customer_service),
) -> Customer:
    """
    Create a customer account on a customer's behalf.

    The password is hashed before storage and never returned.
    """
    return await service.create_customer(request)


@router.put("/{customer_id}", response_model=Customer, dependencies=[SelfOrStaff])
async def update_customer(
    request: CustomerUpdate,
    customer_id: int = Path(..., gt=0),
    service: ICustomerService = Depends(get_customer_service),
) -> Customer:
    try:
        return await service.update_customer(customer_id, request)
    except CustomerNotFoundError:
        raise HTTPException(status_code=404, detail="Customer not found")


@router.delete("/{customer_id}", status_code=204, dependencies=[RequireAdmin])
async def delete_customer(
    customer_id: int = Path(..., gt=0),
    service: ICustomerService = Depends(get_customer_service),
) -> None:
    """Delete a customer. Their orders are left in place."""
    try:
        await service.delete_customer(customer_id)
    except CustomerNotFoundError:
        raise HTTPException(status_code=404, detail="Customer not found")
