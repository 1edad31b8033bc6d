"""Customer registration API endpoints.

- POST /api/customers - Register a customer
- GET /api/customers/{customer_id} - Get a single customer
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.travel_app.application.dto.customer_dto import CustomerDTO, RegisterCustomerRequest
from app.travel_app.application.exceptions import (
    CustomerAlreadyExistsError,
    CustomerNotFoundError,
    InvalidInputError,
)
from app.travel_app.application.use_cases.register_customer import (
    GetCustomerUseCase,
    RegisterCustomerUseCase,
)
from app.travel_app.infrastructure.db.session import get_db_session
from app.travel_app.infrastructure.repositories.sql_customer_repository import (
    SqlCustomerRepository,
)
from app.travel_app.presentation.api.errors import invalid_input_exception

router = APIRouter()


@router.post("/customers", response_model=CustomerDTO, status_code=status.HTTP_201_CREATED)
async def register_customer(
    request: RegisterCustomerRequest,
    session: AsyncSession = Depends(get_db_session),
) -> CustomerDTO:
    """Register a new customer.

    Args:
        request: Raw registration fields.
        session: Database session (injected).

    Returns:
        CustomerDTO for the registered customer.

    Raises:
        HTTPException: 422 if any field is invalid, listing every bad field.
        HTTPException: 409 if the email is already registered, including by a
            concurrent request.
    """
    use_case = RegisterCustomerUseCase(customer_repository=SqlCustomerRepository(session))

    try:
        result = await use_case.execute(request)
        await session.commit()
        return result
    except InvalidInputError as e:
        raise invalid_input_exception(e) from e
    except CustomerAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message,
        ) from e
    except IntegrityError as e:
        # Lost a race with a concurrent registration of the same email
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=CustomerAlreadyExistsError(request.email).message,
        ) from e


@router.get("/customers/{customer_id}", response_model=CustomerDTO)
async def get_customer(
    customer_id: Annotated[UUID, Path(description="Customer ID")],
    session: AsyncSession = Depends(get_db_session),
) -> CustomerDTO:
    """Get a single customer by ID.

    Raises:
        HTTPException: 404 if the customer does not exist.
    """
    use_case = GetCustomerUseCase(customer_repository=SqlCustomerRepository(session))

    try:
        return await use_case.execute(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e
