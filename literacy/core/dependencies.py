"""Service instances built once at import time and the FastAPI dependencies that hand them out."""

from datetime import timedelta

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.core.config import settings
from literacy.core.database import aget_db
from literacy.models.user import User
from literacy.services.AccountEmails import build_account_mailer
from literacy.services.CourseCatalog import CourseCatalog
from literacy.services.CredentialStore import CredentialStore
from literacy.services.ProgressAggregator import ProgressAggregator
from literacy.services.QuizEvaluator import QuizEvaluator
from literacy.services.SessionAuthority import SessionAuthority

credential_store = CredentialStore()
course_catalog = CourseCatalog()
progress_aggregator = ProgressAggregator()
quiz_evaluator = QuizEvaluator(course_catalog, progress_aggregator)

session_authority = SessionAuthority(
    credential_store=credential_store,
    mailer=build_account_mailer(),
    require_email_verification=settings.REQUIRE_EMAIL_VERIFICATION,
    session_ttl=timedelta(days=settings.SESSION_TTL_DAYS),
    verification_token_ttl=timedelta(hours=settings.VERIFICATION_TOKEN_TTL_HOURS),
    reset_token_ttl=timedelta(hours=settings.RESET_TOKEN_TTL_HOURS),
    bcrypt_rounds=settings.BCRYPT_ROUNDS,
)


def get_session_authority() -> SessionAuthority:
    return session_authority


def get_course_catalog() -> CourseCatalog:
    return course_catalog


def get_progress_aggregator() -> ProgressAggregator:
    return progress_aggregator


def get_quiz_evaluator() -> QuizEvaluator:
    return quiz_evaluator


def get_session_token(request: Request):
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(aget_db),
    authority: SessionAuthority = Depends(get_session_authority)
) -> User:
    """
    Dependency to get current authenticated user from the session cookie
    Raises AuthError (401) if not authenticated, EmailNotVerifiedError (403)
    when verification is required and missing
    """
    return await authority.current_user(db, get_session_token(request))
