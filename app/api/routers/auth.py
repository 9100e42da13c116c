from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.api.deps import get_current_user
from app.data.database import get_db
from app.services.user_service import UserService
from app.domain.schemas import UserCreate, UserLogin, UserRead, TokenOut

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserRead, status_code=201)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.register(payload)

@router.post("/login", response_model=TokenOut)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.login(payload)

@router.get("/me", response_model=UserRead)
def me(user: UserRead = Depends(get_current_user)):
    return user
