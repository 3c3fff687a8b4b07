"""
Chirper Backend — Account Route Handlers
==========================================

What:  Handles POST /register and POST /login.
How:   Parses the JSON body, delegates to RequestHandler, returns the account.
       Failures are raised by the handler and mapped to 400 / 401 / 409
       (empty body) by the global exception handlers in main.py.
"""

from fastapi import APIRouter, Depends

from app.dependencies import get_request_handler
from app.schemas.account import AccountCredentials, AccountResponse
from app.services.request_handler import RequestHandler

router = APIRouter(tags=["Accounts"])


@router.post(
    "/register",
    response_model=AccountResponse,
    responses={
        200: {"description": "Account created", "model": AccountResponse},
        400: {"description": "Blank username or password shorter than 4 characters"},
        409: {"description": "Username already taken"},
    },
    summary="Register a new account",
)
async def register_account(
    account: AccountCredentials,
    handler: RequestHandler = Depends(get_request_handler),
) -> AccountResponse:
    return await handler.register_account(account)


@router.post(
    "/login",
    response_model=AccountResponse,
    responses={
        200: {"description": "Credentials matched", "model": AccountResponse},
        401: {"description": "No account with this username and password"},
    },
    summary="Log in with username and password",
)
async def login(
    account: AccountCredentials,
    handler: RequestHandler = Depends(get_request_handler),
) -> AccountResponse:
    return await handler.login(account)
