from fastapi import APIRouter, Body, Depends

from app.core.state import AppState, get_state
from app.models.domain import LoginPayload, UserPayload
from app.services.users import UserHandler

router = APIRouter(prefix="/api/users", tags=["Users"])


def users_handler(state: AppState = Depends(get_state)) -> UserHandler:
    return state.users


@router.post("/register", status_code=201, summary="Register a new user")
async def register_user(payload: UserPayload, users: UserHandler = Depends(users_handler)):
    return await users.register(payload)


@router.post("", status_code=201, summary="Register a new user", include_in_schema=False)
async def create_user(payload: UserPayload, users: UserHandler = Depends(users_handler)):
    return await users.register(payload)


@router.post("/login", summary="Login a user")
async def login_user(payload: LoginPayload, users: UserHandler = Depends(users_handler)):
    """
    Checks credentials. Unknown email and wrong password produce the same
    error. No token or session is issued.
    """
    return await users.login(payload)


@router.get("", summary="Get all users")
def list_users(users: UserHandler = Depends(users_handler)):
    return users.list_all()


@router.get("/{user_id}", summary="Get user by ID")
def get_user(user_id: str, users: UserHandler = Depends(users_handler)):
    return users.get(user_id)


@router.put("/{user_id}", summary="Update user details")
async def update_user(
    user_id: str,
    payload: UserPayload = Body(None),
    users: UserHandler = Depends(users_handler),
):
    return await users.update_user(user_id, payload or UserPayload())


@router.delete("/{user_id}", summary="Delete a user")
def delete_user(user_id: str, users: UserHandler = Depends(users_handler)):
    return users.delete(user_id)
