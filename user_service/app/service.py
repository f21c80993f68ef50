import logging

from shared_common.exceptions import NotFoundError, ValidationError

from .models import User
from .repository import UserRepository
from .schemas import UserRequest, UserResponse
from .security import hash_password

logger= logging.getLogger(__name__)


def to_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, username=user.username, email=user.email)


class UserService:
    """User use cases.

    Field rules are enforced by ``UserRequest`` at the HTTP boundary; here
    only a missing request is rejected. Username and email are not required
    to be unique.
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    @staticmethod
    def _require_request(user_request: UserRequest | None):
        if user_request is None:
            raise ValidationError("User request is required")

    def _get_or_raise(self, user_id: int) -> User:
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User not found with ID: {user_id}")
        return user

    def create(self, user_request: UserRequest) -> UserResponse:
        logger.info("Creating new user")
        self._require_request(user_request)
        user = User(
            username=user_request.username,
            email=user_request.email,
            password_hash=hash_password(user_request.password),
        )
        user = self.repository.save(user)
        logger.info(f"Created new user: {user.to_dict(exclude=('password_hash',))}")
        return to_user_response(user)

    def get(self, user_id: int) -> UserResponse:
        logger.info(f"Retrieving user with ID: {user_id}")
        return to_user_response(self._get_or_raise(user_id))

    def list_all(self) -> list[UserResponse]:
        users = self.repository.find_all()
        logger.info(f"Retrieved {len(users)} users")
        return [to_user_response(user) for user in users]

    def update(self, user_id: int, user_request: UserRequest) -> UserResponse:
        logger.info(f"Updating user with ID: {user_id}")
        self._require_request(user_request)
        user = self._get_or_raise(user_id)
        user.username = user_request.username
        user.email = user_request.email
        user.password_hash = hash_password(user_request.password)
        user = self.repository.save(user)
        logger.info(f"Updated user: {user.to_dict(exclude=('password_hash',))}")
        return to_user_response(user)

    def delete(self, user_id: int):
        logger.info(f"Deleting user with ID: {user_id}")
        self.repository.delete(self._get_or_raise(user_id))
        logger.info(f"Deleted user with ID: {user_id}")

    def exists(self, user_id: int) -> bool:
        logger.debug(f"Checking if user exists with ID: {user_id}")
        return self.repository.exists(user_id)
