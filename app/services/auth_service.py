# app/services/auth_service.py
from sqlmodel import Session

from app.core.exceptions import NotAuthorized
from app.core.security import issue_token, verify_password
from app.repositories.user_repo import UserRepository
from app.schemas.auth import LoginRequest, LoginToken


class AuthService:
    """Credential check and token issuing."""

    def __init__(self, session: Session):
        self.users = UserRepository(session)

    def login(self, payload: LoginRequest) -> LoginToken:
        """
        Exchange email/password for an access token.

        The lookup does not filter on `deleted_at`: soft-deleted accounts
        keep logging in.

        Raises:
            NotAuthorized: unknown email or wrong password (same message
                for both).
        """
        user = self.users.get_by_email(payload.email)
        if user is None:
            raise NotAuthorized("Not Authorized")

        if not verify_password(payload.password, user.password):
            raise NotAuthorized("Not Authorized")

        return LoginToken(
            id=user.id,
            roles=list(user.roles),
            token=issue_token(user.id, user.roles),
        )
