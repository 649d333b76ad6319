from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from coursehub.core.enums import RoleEnum
from coursehub.core.security import hash_password
from coursehub.modules.identity.schemas import LoginRequest, Principal, UserCreate
from coursehub.modules.identity.service import IdentityService, principal_from_token
from coursehub.shared.exceptions import ConflictException, NotFoundException, UnauthenticatedException


@dataclass
class FakeUser:
    email: str
    password_hash: str
    name: str
    role: RoleEnum
    id: UUID = field(default_factory=uuid4)


class FakeIdentityRepository:
    def __init__(self) -> None:
        self.users: dict[str, FakeUser] = {}

    async def get_user_by_email(self, email: str) -> FakeUser | None:
        return self.users.get(email)

    async def get_user_by_id(self, user_id: UUID) -> FakeUser | None:
        return next((user for user in self.users.values() if user.id == user_id), None)

    async def create_user(self, email: str, password_hash: str, name: str, role: RoleEnum) -> FakeUser:
        if email in self.users:
            raise ConflictException("User already exists")
        user = FakeUser(email=email, password_hash=password_hash, name=name, role=role)
        self.users[email] = user
        return user


def registration(email: str = "grace@coursehub.dev") -> UserCreate:
    return UserCreate(email=email, password="Secret123", name="Grace Hopper", role=RoleEnum.TEACHER)


@pytest.mark.asyncio
async def test_register_returns_token_with_role_claim() -> None:
    repository = FakeIdentityRepository()
    service = IdentityService(repository)  # type: ignore[arg-type]

    response = await service.register(registration())

    assert response.message == "User registered successfully"
    assert response.user.role == RoleEnum.TEACHER
    assert repository.users["grace@coursehub.dev"].password_hash != "Secret123"
    principal = principal_from_token(response.token)
    assert principal.account_id == response.user.id
    assert principal.role == RoleEnum.TEACHER


@pytest.mark.asyncio
async def test_register_with_taken_email_is_conflict() -> None:
    repository = FakeIdentityRepository()
    service = IdentityService(repository)  # type: ignore[arg-type]
    await service.register(registration())

    with pytest.raises(ConflictException) as exc:
        await service.register(registration())

    assert exc.value.message == "User already exists"
    assert exc.value.status_code == 400
    assert len(repository.users) == 1


@pytest.mark.asyncio
async def test_login_checks_password() -> None:
    repository = FakeIdentityRepository()
    repository.users["ada@coursehub.dev"] = FakeUser(
        email="ada@coursehub.dev",
        password_hash=hash_password("Correct123"),
        name="Ada",
        role=RoleEnum.STUDENT,
    )
    service = IdentityService(repository)  # type: ignore[arg-type]

    response = await service.login(LoginRequest(email="ada@coursehub.dev", password="Correct123"))
    assert response.message == "Login successful"

    with pytest.raises(UnauthenticatedException) as exc:
        await service.login(LoginRequest(email="ada@coursehub.dev", password="Wrong123"))
    assert exc.value.status_code == 401
    assert exc.value.message == "Invalid credentials"

    with pytest.raises(UnauthenticatedException):
        await service.login(LoginRequest(email="nobody@coursehub.dev", password="Correct123"))


@pytest.mark.asyncio
async def test_profile_of_deleted_account_is_not_found() -> None:
    service = IdentityService(FakeIdentityRepository())  # type: ignore[arg-type]

    with pytest.raises(NotFoundException) as exc:
        await service.get_profile(Principal(account_id=uuid4(), role=RoleEnum.STUDENT))

    assert exc.value.message == "User not found"
