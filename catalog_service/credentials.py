"""
Credential store: account signup and login.
"""
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
import logging

from .auth import TokenService, dummy_verify, hash_password, verify_password
from .errors import DuplicateEmailError, InternalError, InvalidCredentialsError
from .models import Account

logger = logging.getLogger(__name__)


class CredentialStore:
    """Registers accounts and exchanges valid credentials for a bearer token."""

    def __init__(self, db: Session, tokens: TokenService) -> None:
        self.db = db
        self.tokens = tokens

    def find_by_email(self, email: str) -> Optional[Account]:
        try:
            return self.db.query(Account).filter(Account.email == email).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise InternalError("account lookup failed") from e

    def register(self, email: str, password: str) -> Account:
        """
        Create an account for email.

        The lookup below is only a fast path; the UNIQUE constraint on
        users.email decides concurrent signups for the same address.

        Raises:
            DuplicateEmailError: If an account with this exact email exists
            InternalError: If hashing or the store fails
        """
        if self.find_by_email(email) is not None:
            logger.info("Signup rejected, email already registered: %s", email)
            raise DuplicateEmailError(email)

        account = Account(email=email, password=hash_password(password))
        try:
            self.db.add(account)
            self.db.commit()
            self.db.refresh(account)
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Signup rejected by unique constraint: %s", email)
            raise DuplicateEmailError(email) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise InternalError("account insert failed") from e

        logger.info("Account registered: id=%s email=%s", account.id, account.email)
        return account

    def authenticate(self, email: str, password: str) -> str:
        """
        Verify credentials and issue a token bound to the account.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password, alike
        """
        account = self.find_by_email(email)
        if account is None:
            dummy_verify()
            logger.info("Login failed: email=%s", email)
            raise InvalidCredentialsError()
        if not verify_password(password, account.password):
            logger.info("Login failed: email=%s", email)
            raise InvalidCredentialsError()

        logger.info("Login succeeded: id=%s email=%s", account.id, account.email)
        return self.tokens.issue(account.id, account.email)
