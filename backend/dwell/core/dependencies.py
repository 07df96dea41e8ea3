"""Common dependencies for the application."""

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from dwell.adapters.email import EmailSender, get_email_sender
from dwell.config.public import PublicSettings, settings
from dwell.core.database import get_db
from dwell.core.exceptions import AuthenticationError
from dwell.core.security import decode_access_token
from dwell.models import User
from dwell.services import (
    BlockService,
    MessageService,
    ModerationService,
    NotificationDispatcher,
    QuotaService,
    RealtimeBroker,
    ReportService,
)

security = HTTPBearer()

_realtime_broker: RealtimeBroker | None = None


def get_settings() -> PublicSettings:
    return settings


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Security(security),
    app_settings: PublicSettings = Depends(get_settings),
) -> int:
    """Get the user id carried by the bearer token."""
    try:
        return decode_access_token(app_settings, credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=401,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Get current user from database."""
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(
            status_code=401,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return current_user


def get_quota_service(
    db: Session = Depends(get_db), app_settings: PublicSettings = Depends(get_settings)
) -> QuotaService:
    return QuotaService(db, app_settings.DAILY_MESSAGE_LIMIT)


def get_block_service(db: Session = Depends(get_db)) -> BlockService:
    return BlockService(db)


def get_message_service(
    db: Session = Depends(get_db),
    quota_service: QuotaService = Depends(get_quota_service),
    block_service: BlockService = Depends(get_block_service),
    app_settings: PublicSettings = Depends(get_settings),
) -> MessageService:
    return MessageService(
        db,
        quota_service,
        block_service,
        max_words=app_settings.MESSAGE_MAX_WORDS,
        max_chars=app_settings.MESSAGE_MAX_CHARS,
    )


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(db)


def get_moderation_service(db: Session = Depends(get_db)) -> ModerationService:
    return ModerationService(db)


def get_realtime_broker() -> RealtimeBroker:
    """Process-wide broker sharing one Redis connection pool."""
    global _realtime_broker
    if _realtime_broker is None:
        _realtime_broker = RealtimeBroker(settings.REDIS_URL)
    return _realtime_broker


async def close_realtime_broker() -> None:
    global _realtime_broker
    if _realtime_broker is not None:
        await _realtime_broker.close()
        _realtime_broker = None


def get_email_backend(app_settings: PublicSettings = Depends(get_settings)) -> EmailSender:
    return get_email_sender(app_settings)


def get_notification_dispatcher(
    db: Session = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_backend),
    app_settings: PublicSettings = Depends(get_settings),
) -> NotificationDispatcher:
    return NotificationDispatcher(db, email_sender, app_settings)
