import logging
from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session, select
from uuid import UUID
from app.models.user import User
from app.schemas.user import Token, UserCreate, UserRead
from app.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user,
)
from app.database import get_session
from app.utils.validation import is_valid_length, is_valid_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# Registro
@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    if not is_valid_length(user_create.username):
        raise HTTPException(status_code=400, detail="El usuario debe tener entre 2 y 50 caracteres.")
    if not is_valid_password(user_create.password):
        raise HTTPException(
            status_code=400,
            detail="La contraseña debe tener al menos 8 caracteres, un número, una mayúscula y una minúscula.",
        )

    user_exists = session.exec(select(User).where(User.username == user_create.username)).first()
    if user_exists:
        raise HTTPException(status_code=400, detail="Usuario ya registrado")

    user = User(username=user_create.username, hashed_password=get_password_hash(user_create.password))
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Usuario %s registrado", user.id)
    return user

# Login
@router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user = session.exec(select(User).where(User.username == form_data.username)).first()
    if not user or not verify_password(form_data.password, user.hashed_password):
        logger.warning("Login fallido para %r", form_data.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciales incorrectas")

    access_token = create_access_token(data={"sub": str(user.id)})
    return {"access_token": access_token, "token_type": "bearer"}

# Ruta protegida
@router.get("/me", response_model=UserRead)
def read_users_me(user_id: UUID = Depends(get_current_user), session: Session = Depends(get_session)):
    user = session.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="Usuario no encontrado")
    return user
