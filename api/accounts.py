"""
Account API routes — register, login, self profile, delete, list.

Route prefix: /api

Every success answers ``201`` (login and reads included); every failure is an
``AccountError`` rendered as ``{status: false, message}`` by
``api.middleware``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from api.schemas import (
    ErrorEnvelope,
    ListResponse,
    LoginRequest,
    LoginResponse,
    LoginUser,
    MessageEnvelope,
    PublicUser,
    RegisteredUser,
    RegisterRequest,
    RegisterResponse,
    SelfProfile,
    SelfResponse,
)
from auth.dependencies import get_current_identity, user_repository
from auth.errors import AuthError, NotFoundError, PersistenceError, ValidationError
from auth.jwt import create_token
from auth.models import Identity
from auth.password import hash_password_async, verify_password_async
from config.settings import config
from database.repository import UserRepository, by_account, by_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

_READ_FAILED = "Gagal mengambil data pengguna"

_ERRORS: Dict[str, Dict[str, Any]] = {
    "default": {"model": ErrorEnvelope},
}


def _describe(exc: Exception) -> str:
    return getattr(exc, "error", None) or str(exc)


def _validate_registration(req: RegisterRequest) -> None:
    if not req.username:
        raise ValidationError("Masukkan username")
    if not req.nama:
        raise ValidationError("Masukkan nama")
    if not req.email:
        raise ValidationError("Masukkan email")
    if config.allowed_email_marker not in req.email:
        raise ValidationError("Harap pakai Gmail")
    if not req.password:
        raise ValidationError("Masukkan password")
    if len(req.password) < config.min_password_length:
        raise ValidationError(
            f"Kata sandi minimal harus {config.min_password_length} karakter"
        )


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses=_ERRORS,
    summary="User Register",
)
async def register(
    req: RegisterRequest,
    repo: UserRepository = Depends(user_repository),
) -> RegisterResponse:
    """Register a new user."""
    _validate_registration(req)

    try:
        hashed = await hash_password_async(req.password)
        user = await repo.create(
            username=req.username,
            nama=req.nama,
            email=req.email,
            password=hashed,
            history="[]",
        )
    except (PersistenceError, ValueError) as exc:
        # Duplicates and store outages look the same to the caller.
        logger.error("Registration of %s failed (%s): %s", req.username, type(exc).__name__, _describe(exc))
        raise PersistenceError("Gagal menambahkan pengguna") from exc

    logger.info("Registered user %s (%s)", user.username, user.id)
    return RegisterResponse(
        message="Pengguna berhasil ditambahkan",
        user=RegisteredUser.from_user(user),
    )


@router.post(
    "/login",
    status_code=status.HTTP_201_CREATED,
    response_model=LoginResponse,
    responses=_ERRORS,
    summary="User Login",
)
async def login(
    req: LoginRequest,
    repo: UserRepository = Depends(user_repository),
) -> LoginResponse:
    """Login with username or email + password."""
    if not req.account:
        raise ValidationError("Masukkan username atau email")
    if not req.password:
        raise ValidationError("Masukkan password")

    try:
        user = await repo.find_one(by_account(req.account))
        if user is None:
            logger.info("Login: unknown account %s", req.account)
            raise NotFoundError("Pengguna tidak ditemukan")

        if not await verify_password_async(req.password, user.password):
            logger.info("Login: wrong password for %s", user.username)
            raise AuthError("Password salah")

        token = create_token(user.id)
        profile = LoginUser.from_user(user)
    except (PersistenceError, ValueError) as exc:
        logger.error("Login for %s failed: %s", req.account, _describe(exc))
        raise PersistenceError("Gagal login", error=_describe(exc)) from exc

    logger.info("Login: %s (%s)", user.username, user.id)
    return LoginResponse(message="Login berhasil", token=token, user=profile)


@router.get(
    "/user",
    status_code=status.HTTP_201_CREATED,
    response_model=SelfResponse,
    responses=_ERRORS,
    summary="Get User",
)
async def get_self(
    identity: Identity = Depends(get_current_identity),
    repo: UserRepository = Depends(user_repository),
) -> SelfResponse:
    """Return the caller's full profile."""
    try:
        user = await repo.find_one(by_id(identity.user_id))
        if user is None:
            raise PersistenceError(_READ_FAILED, error=f"user {identity.user_id} no longer exists")
        profile = SelfProfile.from_user(user)
    except (PersistenceError, ValueError) as exc:
        logger.error("Reading user %s failed: %s", identity.user_id, _describe(exc))
        raise PersistenceError(_READ_FAILED, error=_describe(exc)) from exc

    return SelfResponse(user=profile)


@router.delete(
    "/user",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageEnvelope,
    responses=_ERRORS,
    summary="Delete User",
)
async def delete_self(
    identity: Identity = Depends(get_current_identity),
    repo: UserRepository = Depends(user_repository),
) -> MessageEnvelope:
    """Delete the caller's account. Succeeds whether or not a row was removed."""
    try:
        deleted = await repo.destroy(by_id(identity.user_id))
    except PersistenceError as exc:
        logger.error("Deleting user %s failed: %s", identity.user_id, _describe(exc))
        raise PersistenceError(_READ_FAILED, error=_describe(exc)) from exc

    logger.info("Deleted user %s (%d row(s))", identity.user_id, deleted)
    return MessageEnvelope(message="Pengguna berhasil di hapus")


@router.get(
    "/listuser",
    status_code=status.HTTP_201_CREATED,
    response_model=ListResponse,
    responses=_ERRORS,
    summary="Get List User",
)
async def list_users(
    identity: Identity = Depends(get_current_identity),
    repo: UserRepository = Depends(user_repository),
) -> ListResponse:
    """List every user without id, password or history."""
    try:
        users = await repo.find_all()
    except PersistenceError as exc:
        logger.error("Listing users failed: %s", _describe(exc))
        raise PersistenceError(_READ_FAILED, error=_describe(exc)) from exc

    return ListResponse(list=[PublicUser.from_user(user) for user in users])
