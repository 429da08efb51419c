"""Shared API dependencies for authentication and service wiring."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from dubhub.core.security import decode_access_token
from dubhub.db.session import get_db
from dubhub.models import Profile
from dubhub.models.profile import ROLE_ARTIST
from dubhub.services.artist_tags import ArtistTagService
from dubhub.services.notifications import NotificationService
from dubhub.services.policy import Actor
from dubhub.services.reputation import ReputationLedger
from dubhub.services.verification import VerificationWorkflow

logger = logging.getLogger(__name__)

# HTTP Bearer scheme for Supabase access tokens
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_profile(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    db: SessionDep,
) -> Profile:
    """Resolve the bearer token to the caller's profile.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        Profile of the authenticated user

    Raises:
        HTTPException: 401 if the token is invalid, 404 if the profile is
            missing, 403 if the account is an unverified artist
    """
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        ) from err

    subject = payload.get("sub")
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    profile = db.get(Profile, subject)
    if profile is None:
        logger.error("Profile not found for authenticated user %s", subject)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User profile not found. Please complete signup.",
        )

    if profile.account_type == ROLE_ARTIST and not profile.verified_artist:
        logger.warning("Unverified artist blocked from login: %s", subject)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your artist account is awaiting verification.",
        )
    return profile


CurrentProfileDep = Annotated[Profile, Depends(get_current_profile)]


def get_current_actor(profile: CurrentProfileDep) -> Actor:
    """Reduce the caller's profile to the identity the workflow trusts."""
    return Actor(user_id=profile.id, role=profile.role)


CurrentActorDep = Annotated[Actor, Depends(get_current_actor)]


def get_notification_service(db: SessionDep) -> NotificationService:
    """Return a notification service bound to the request session."""
    return NotificationService(db)


NotificationServiceDep = Annotated[NotificationService, Depends(get_notification_service)]


def get_reputation_ledger(db: SessionDep) -> ReputationLedger:
    """Return a karma ledger bound to the request session."""
    return ReputationLedger(db)


ReputationLedgerDep = Annotated[ReputationLedger, Depends(get_reputation_ledger)]


def get_verification_workflow(
    db: SessionDep,
    notifier: NotificationServiceDep,
    ledger: ReputationLedgerDep,
) -> VerificationWorkflow:
    """Return the verification workflow wired to the request's collaborators."""
    return VerificationWorkflow(db, notifier=notifier, ledger=ledger)


WorkflowDep = Annotated[VerificationWorkflow, Depends(get_verification_workflow)]


def get_artist_tag_service(db: SessionDep) -> ArtistTagService:
    """Return an artist tag service bound to the request session."""
    return ArtistTagService(db)


ArtistTagServiceDep = Annotated[ArtistTagService, Depends(get_artist_tag_service)]
