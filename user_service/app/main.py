from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, Response
from sqlalchemy.orm import Session

from shared_common.errors import ErrorResponse, register_exception_handlers
from shared_common.logging_config import configure_logging

from .db import get_db, init_db
from .repository import UserRepository
from .schemas import UserRequest, UserResponse
from .service import UserService

SERVICE_NAME= "user_service"

configure_logging(SERVICE_NAME)
logger= logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("User service started")
    yield

app= FastAPI(lifespan=lifespan, title="User Service")
register_exception_handlers(app)

ERROR_RESPONSES= {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))

@app.post("/users", response_model= UserResponse, status_code=201, responses=ERROR_RESPONSES)
def create_user(user: UserRequest, service: UserService = Depends(get_user_service)):
    logger.info(f"POST /users - Creating user: {user.username}")
    return service.create(user)

@app.get("/users", response_model= list[UserResponse])
def list_users(service: UserService = Depends(get_user_service)):
    logger.info("GET /users - Retrieving all users")
    return service.list_all()

@app.get("/users/{user_id}", response_model= UserResponse, responses=ERROR_RESPONSES)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    logger.info(f"GET /users/{user_id} - Retrieving user")
    return service.get(user_id)

@app.put("/users/{user_id}", response_model= UserResponse, responses=ERROR_RESPONSES)
def update_user(user_id: int, user: UserRequest, service: UserService = Depends(get_user_service)):
    logger.info(f"PUT /users/{user_id} - Updating user")
    return service.update(user_id, user)

@app.delete("/users/{user_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    logger.info(f"DELETE /users/{user_id} - Deleting user")
    service.delete(user_id)
    return Response(status_code=204)

@app.get("/users/{user_id}/exists", status_code=200, responses={404: {"description": "User does not exist"}})
def check_user_exists(user_id: int, service: UserService = Depends(get_user_service)):
    """Existence probe used by the order service. Both answers have an empty body."""
    logger.info(f"GET /users/{user_id}/exists - Checking if user exists")
    return Response(status_code=200 if service.exists(user_id) else 404)

@app.get("/health")
def health():
    return {"status": "ok", "service": SERVICE_NAME}
