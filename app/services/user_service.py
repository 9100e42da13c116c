from sqlalchemy.orm import Session
from app.data.models.user import UserModel
from app.domain.errors import BadRequestError, UnauthorizedError
from app.repos.user_repo import UserRepo
from app.domain.schemas import UserCreate, UserLogin, UserRead, TokenOut
from app.utils.security import hash_password, verify_password, create_access_token
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def register(self, payload: UserCreate) -> UserRead:
        email = payload.email.lower()
        if self.repo.get_user_by_email(email):
            raise BadRequestError("User already exists")

        user = UserModel(
            name=payload.name,
            email=email,
            password_hash=hash_password(payload.password),
        )
        created = self.repo.create_user(user)
        logger.info(f"User {created.id} registered")
        return UserRead.model_validate(created)

    def login(self, payload: UserLogin) -> TokenOut:
        user = self.repo.get_user_by_email(payload.email.lower())
        # ten sam komunikat dla zlego maila i zlego hasla
        if not user or not verify_password(payload.password, user.password_hash):
            raise UnauthorizedError("Invalid credentials")

        return TokenOut(
            token=create_access_token(user.id),
            user=UserRead.model_validate(user),
        )
