"""Account router for registration, login, profile and credential management."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from authcore.domain.account import AccountChanges, AccountProfile
from authcore.domain.shared.time import utc_now
from authcore.exceptions import AuthError
from authcore.infrastructure.persistence.sqlalchemy import commit
from authcore.presentation.api.dependencies import (
    AuthService,
    CurrentAccountId,
    DBSession,
)
from authcore.presentation.api.schemas import (
    DeleteAccountRequest,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    TokenResponse,
    UpdateAccountRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _profile_response(profile: AccountProfile) -> ProfileResponse:
    return ProfileResponse.model_validate(profile)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    responses={
        201: {"description": "Account registered successfully"},
        409: {"description": "Email or username already registered"},
        422: {"description": "Malformed email or weak password"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> ProfileResponse:
    try:
        profile = await auth_service.register(
            email=request.email,
            username=request.username,
            first_name=request.first_name,
            last_name=request.last_name,
            password=request.password,
        )
        await commit(session)
    except AuthError:
        await session.rollback()
        raise

    return _profile_response(profile)


@router.post(
    "/login",
    summary="Login with email or username",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Wrong credentials"},
        409: {"description": "Not registered"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> TokenResponse:
    try:
        token = await auth_service.login(
            email_or_username=request.email_or_username,
            password=request.password,
        )
        await commit(session)
    except AuthError:
        await session.rollback()
        raise

    return TokenResponse(
        access_token=token.token,
        token_type=token.token_type,
        expires_at=token.expires_at,
        expires_in=token.expires_in(utc_now()),
    )


@router.get(
    "/profile",
    summary="Get the current account's profile",
)
async def get_own_profile(
    account_id: CurrentAccountId,
    auth_service: AuthService,
) -> ProfileResponse:
    profile = await auth_service.get_profile(account_id)
    return _profile_response(profile)


@router.get(
    "/{profile_id}/profile",
    summary="Get an account's profile by id",
    responses={404: {"description": "Account not found"}},
)
async def get_profile(
    profile_id: UUID,
    _: CurrentAccountId,
    auth_service: AuthService,
) -> ProfileResponse:
    profile = await auth_service.get_profile(profile_id)
    return _profile_response(profile)


@router.patch(
    "/update",
    summary="Update credentials or profile fields",
    responses={
        400: {"description": "Current password is wrong"},
        409: {"description": "Email or username already registered"},
        422: {"description": "Malformed email or weak password"},
    },
)
async def update_account(
    request: UpdateAccountRequest,
    account_id: CurrentAccountId,
    auth_service: AuthService,
    session: DBSession,
) -> ProfileResponse:
    changes = AccountChanges(
        email=request.email,
        username=request.username,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        avatar=request.avatar,
    )
    try:
        profile = await auth_service.update_credentials(
            account_id=account_id,
            current_password=request.current_password,
            changes=changes,
        )
        await commit(session)
    except AuthError:
        await session.rollback()
        raise

    return _profile_response(profile)


@router.get(
    "/check",
    summary="Confirm the token's account still exists",
)
async def check_auth(
    account_id: CurrentAccountId,
    auth_service: AuthService,
    session: DBSession,
) -> ProfileResponse:
    try:
        profile = await auth_service.check_auth(account_id)
        await commit(session)
    except AuthError:
        await session.rollback()
        raise

    return _profile_response(profile)


@router.delete(
    "/delete",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete the current account",
    responses={
        403: {"description": "Password is wrong"},
        404: {"description": "Account not found"},
    },
)
async def delete_account(
    request: DeleteAccountRequest,
    account_id: CurrentAccountId,
    auth_service: AuthService,
    session: DBSession,
) -> None:
    try:
        await auth_service.delete_account(account_id, request.password)
        await commit(session)
    except AuthError:
        await session.rollback()
        raise

    logger.info("Account %s deleted via API", account_id)
