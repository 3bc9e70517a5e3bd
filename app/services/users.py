from typing import Any, Dict

from app.core.errors import Conflict, InvalidCredentials
from app.models.domain import LoginPayload, User, UserPayload
from app.services.auth import hash_password_async, verify_password_async
from app.services.base import ResourceHandler, new_id


class UserHandler(ResourceHandler[User]):
    """Registration, profile CRUD and login.

    Hashing is the one step that yields control, so registration checks the
    email twice: once up front to skip the hash for obvious duplicates and
    again atomically when the record is inserted.
    """

    resource = "users"
    record_model = User
    created_id_key = "user_id"
    updated_key = "user"

    required_fields = ("username", "email", "password")
    updatable_fields = ("username", "email", "password_hash")
    unique_fields = ("email",)
    empty_list_is_error = False

    created_message = "User registered successfully"
    conflict_message = "Email already exists"
    not_found_message = "User not found"
    updated_message = "User updated successfully"
    deleted_message = "User deleted successfully"

    def serialize(self, record: User) -> Dict[str, Any]:
        return record.model_dump(exclude={"password_hash"})

    def _email_taken(self, email: str) -> bool:
        return self.store.find(lambda u: u.email == email) is not None

    async def register(self, payload: UserPayload) -> Dict[str, Any]:
        data = payload.model_dump()
        self.validate_create(data)
        if self._email_taken(data["email"]):
            self.logger.warning("Registration rejected, email already exists")
            raise Conflict(self.conflict_message)

        password_hash = await hash_password_async(data["password"])
        user = User(
            id=new_id(),
            username=data["username"],
            email=data["email"],
            password_hash=password_hash,
        )
        self.store_new(user, data)
        self.logger.info(f"Registered user {user.id}")
        return self.created_payload(user)

    async def update_user(self, record_id: str, payload: UserPayload) -> Dict[str, Any]:
        self._get_record(record_id)
        data = {f: getattr(payload, f) for f in payload.model_fields_set}
        # Email changes are not re-checked against other users
        fields = self.supplied_fields(data)
        if data.get("password"):
            fields["password_hash"] = await hash_password_async(data["password"])
        return self.apply_update(record_id, fields)

    async def login(self, payload: LoginPayload) -> Dict[str, Any]:
        user = None
        if payload.email:
            user = self.store.find(lambda u: u.email == payload.email)
        if user is None:
            self.logger.warning("Login failed")
            raise InvalidCredentials()

        if not payload.password or not await verify_password_async(
            payload.password, user.password_hash
        ):
            self.logger.warning("Login failed")
            raise InvalidCredentials()

        self.logger.info(f"Login for user {user.id}")
        return {
            "message": "Login successful",
            "username": user.username,
            "user_id": user.id,
        }
