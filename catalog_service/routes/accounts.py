"""
Signup and login endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth import TokenService
from ..credentials import CredentialStore
from ..db import get_db
from ..guard import get_token_service
from ..schemas import AccountCredentials, MessageResponse, TokenResponse

router = APIRouter(tags=["accounts"])


def get_credential_store(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> CredentialStore:
    return CredentialStore(db, tokens)


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: AccountCredentials, store: CredentialStore = Depends(get_credential_store)):
    store.register(payload.email, payload.password)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
def login(payload: AccountCredentials, store: CredentialStore = Depends(get_credential_store)):
    token = store.authenticate(payload.email, payload.password)
    return TokenResponse(token=token)
