"""Customers resource handlers.

Admin and Staff manage customers; a Customer caller may only read their
own profile.
"""

from fastapi import Depends, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.customer_commands import (
    CreateCustomer,
    DeleteCustomer,
    UpdateCustomer,
)
from src.application.commands.handlers.customer_handlers import (
    CreateCustomerHandler,
    DeleteCustomerHandler,
    UpdateCustomerHandler,
)
from src.application.queries.customer_queries import GetCustomer, ListCustomers
from src.application.queries.handlers.resource_queries import (
    GetCustomerHandler,
    ListCustomersHandler,
)
from src.core.container import (
    get_create_customer_handler,
    get_delete_customer_handler,
    get_get_customer_handler,
    get_list_customers_handler,
    get_update_customer_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import CallerDep
from src.schemas.customer_schemas import (
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)


async def list_customers(
    caller: CallerDep,
    handler: ListCustomersHandler = Depends(get_list_customers_handler),
) -> list[CustomerResponse] | JSONResponse:
    match await handler.handle(ListCustomers(caller=caller)):
        case Success(value=customers):
            return [CustomerResponse.from_entity(c) for c in customers]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def get_customer(
    customer_id: int,
    caller: CallerDep,
    handler: GetCustomerHandler = Depends(get_get_customer_handler),
) -> CustomerResponse | JSONResponse:
    match await handler.handle(GetCustomer(caller=caller, customer_id=customer_id)):
        case Success(value=customer):
            return CustomerResponse.from_entity(customer)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def create_customer(
    data: CustomerCreateRequest,
    caller: CallerDep,
    handler: CreateCustomerHandler = Depends(get_create_customer_handler),
) -> CustomerResponse | JSONResponse:
    command = CreateCustomer(
        caller=caller,
        name=data.name,
        email=data.email,
        phone=data.phone,
        user_id=data.user_id,
    )
    match await handler.handle(command):
        case Success(value=customer):
            return CustomerResponse.from_entity(customer)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def update_customer(
    customer_id: int,
    data: CustomerUpdateRequest,
    caller: CallerDep,
    handler: UpdateCustomerHandler = Depends(get_update_customer_handler),
) -> Response:
    command = UpdateCustomer(
        caller=caller,
        customer_id=customer_id,
        payload_id=data.id,
        name=data.name,
        email=data.email,
        phone=data.phone,
        user_id=data.user_id,
    )
    match await handler.handle(command):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def delete_customer(
    customer_id: int,
    caller: CallerDep,
    handler: DeleteCustomerHandler = Depends(get_delete_customer_handler),
) -> Response:
    match await handler.handle(DeleteCustomer(caller=caller, customer_id=customer_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
