"""
Authentication Routes

POST /auth/register - Register a student or organization
POST /auth/login - Verify credentials and return the account identity
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.db.mongodb import get_db
from app.services.account_service import AccountService
from app.schemas.schemas import (
    RegisterRequest, RegisterResponse, LoginRequest, LoginResponse
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def get_account_service(db: Database = Depends(get_db)) -> AccountService:
    return AccountService(db)


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(request: RegisterRequest, accounts: AccountService = Depends(get_account_service)):
    """
    Register a new account.

    Students need firstName, lastName, email, phone, password.
    Organizations need orgName, email, password and orgTerms.
    An email can only be registered once across both roles.
    """
    role = accounts.register(request)
    return RegisterResponse(
        message=f"{role.value.capitalize()} registered successfully!",
        role=role.value
    )


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, accounts: AccountService = Depends(get_account_service)):
    """
    Login with email and password.

    The role is found from whichever collection holds the email. Organizations
    also receive orgId, used to scope their post listing.
    """
    return LoginResponse(**accounts.login(request.email, request.password))
