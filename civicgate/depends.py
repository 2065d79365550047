from datetime import timedelta
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from civicgate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from civicgate.api.utils.jwt import verify_jwt
from civicgate.app.services.catalog_cache import CatalogCache
from civicgate.app.services.session_resolver import SessionResolver
from civicgate.app.services.token_service import TokenService, build_token_policies
from civicgate.app.services.unit_of_work import UnitOfWork

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Process-wide; invalidated by every catalog write
catalog_cache = CatalogCache()

token_policies = build_token_policies(
    invitation_ttl=timedelta(hours=ApplicationConfig.INVITATION_TTL_HOURS),
    password_reset_ttl=timedelta(minutes=ApplicationConfig.PASSWORD_RESET_TTL_MINUTES),
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_catalog_cache() -> CatalogCache:
    return catalog_cache


def get_token_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> TokenService:
    return TokenService(uow, token_policies)


def get_session_resolver(uow: UnitOfWork = Depends(get_unit_of_work)) -> SessionResolver:
    return SessionResolver(uow)


def get_session_claims(request: Request) -> Optional[dict]:
    """
    Decoded session cookie, or None.

    A missing, tampered or expired cookie is not an error here: it resolves
    to the anonymous actor downstream.
    """
    token = request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME)
    if not token:
        return None
    return verify_jwt(token)


def session_ttl() -> timedelta:
    return timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS)
