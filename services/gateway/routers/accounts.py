from fastapi import APIRouter, Depends, Request

from portal.accounts import AccountDirectory
from portal.dependencies import get_accounts
from portal.rate_limit import limiter
from portal.schemas import LoginRequest, LoginResponse, UserAddRequest, UserAddResponse

router = APIRouter(tags=["accounts"])


@router.post("/login", response_model=LoginResponse)
@limiter.limit("10/minute")
def login(
    request: Request,
    credentials: LoginRequest,
    accounts: AccountDirectory = Depends(get_accounts),
) -> LoginResponse:
    role = accounts.authenticate(credentials.username, credentials.password)
    return LoginResponse(username=credentials.username, role=role)


@router.post("/users/add", response_model=UserAddResponse)
@limiter.limit("5/minute")
def add_user(
    request: Request,
    user_in: UserAddRequest,
    accounts: AccountDirectory = Depends(get_accounts),
) -> UserAddResponse:
    user = accounts.create_user(user_in.admin_username, user_in.username, user_in.password, user_in.role)
    return UserAddResponse(id=user.id, username=user.username, role=user.role)
