# app/seed.py
import logging
from dataclasses import dataclass

from sqlmodel import Session

from app.models.user import UserRole
from app.schemas.user import UserCreate
from app.services.user_service import UserService

logger = logging.getLogger("uvicorn")


@dataclass(frozen=True)
class DefaultAccount:
    name: str
    email: str
    password: str
    role: UserRole


DEFAULT_ACCOUNTS: tuple[DefaultAccount, ...] = (
    DefaultAccount("Carlos", "admin@example.com", "Carlos123", UserRole.ADMIN),
    DefaultAccount("Camila", "user@example.com", "Camila123", UserRole.USER),
)


def seed_default_users(
    session: Session,
    accounts: tuple[DefaultAccount, ...] = DEFAULT_ACCOUNTS,
) -> list[str]:
    """
    Create each default account unless a user with its email exists.

    Returns:
        Ids of the accounts created by this call.
    """
    service = UserService(session)
    created: list[str] = []

    for account in accounts:
        existing = service.get_by_email(account.email)
        if existing is not None:
            logger.info(f"Default {account.role.value} already exists with {account.email}")
            continue

        user = service.create(
            UserCreate(
                name=account.name,
                email=account.email,
                password=account.password,
                roles=[account.role],
            )
        )
        logger.info(f"Default {account.role.value} created: {user.id}")
        created.append(user.id)

    return created
