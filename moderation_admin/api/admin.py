# moderation_admin/api/admin.py
"""
Admin endpoints for the moderation console: user, post and report listings
and report/post status changes.
"""

import math
from typing import NoReturn, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from moderation_admin.config import settings
from moderation_admin.database import get_db
from moderation_admin.exceptions import AdminServiceError, ReportNotFound
from moderation_admin.models.enums import ReportStatus, UserRole, UserTier
from moderation_admin.schemas.admin import (
    PostListParams,
    PostPage,
    PostStatusUpdate,
    ReportListParams,
    ReportPage,
    ReportStatusUpdate,
    UpdateResult,
    UserListParams,
    UserPage,
)
from moderation_admin.services import admin_service

router = APIRouter(prefix="/admin", tags=["Admin"])


# ─────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────
def require_admin_id(x_admin_id: Optional[str] = Header(None)) -> str:
    """Acting admin id, set by the upstream auth layer."""
    admin_id = (x_admin_id or "").strip()
    if not admin_id:
        raise HTTPException(status_code=401, detail="Admin identity required")
    return admin_id


def _raise_http(exc: AdminServiceError) -> NoReturn:
    if isinstance(exc, ReportNotFound):
        raise HTTPException(status_code=404, detail=exc.message) from exc
    raise HTTPException(status_code=500, detail=exc.message) from exc


def _page_meta(count: int, page: int, limit: int) -> dict:
    return {
        "count": count,
        "page": page,
        "limit": limit,
        "total_pages": math.ceil(count / limit) if count else 0,
    }


# ─────────────────────────────────────────
# GET /admin/users
# ─────────────────────────────────────────
@router.get("/users", response_model=UserPage)
def get_users(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = Query(None, description="Search by nickname or email"),
    role: Optional[UserRole] = Query(None),
    tier: Optional[UserTier] = Query(None),
    db: Session = Depends(get_db),
):
    params = UserListParams(page=page, limit=limit, search=search, role=role, tier=tier)
    try:
        result = admin_service.list_users(db, params)
    except AdminServiceError as exc:
        _raise_http(exc)
    return {"items": result["users"], **_page_meta(result["count"], page, limit)}


# ─────────────────────────────────────────
# GET /admin/posts
# ─────────────────────────────────────────
@router.get("/posts", response_model=PostPage)
def get_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    params = PostListParams(page=page, limit=limit)
    try:
        result = admin_service.list_posts(db, params)
    except AdminServiceError as exc:
        _raise_http(exc)
    return {"items": result["posts"], **_page_meta(result["count"], page, limit)}


# ─────────────────────────────────────────
# GET /admin/reports
# ─────────────────────────────────────────
@router.get("/reports", response_model=ReportPage)
def get_reports(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    status: Optional[ReportStatus] = Query(None, description="pending | processing | resolved | dismissed"),
    db: Session = Depends(get_db),
):
    params = ReportListParams(page=page, limit=limit, status=status)
    try:
        result = admin_service.list_reports(db, params)
    except AdminServiceError as exc:
        _raise_http(exc)
    return {"items": result["reports"], **_page_meta(result["count"], page, limit)}


# ─────────────────────────────────────────
# PATCH /admin/reports/{report_id}/status
# ─────────────────────────────────────────
@router.patch("/reports/{report_id}/status", response_model=UpdateResult)
def patch_report_status(
    report_id: str,
    payload: ReportStatusUpdate,
    admin_id: str = Depends(require_admin_id),
    db: Session = Depends(get_db),
):
    try:
        return admin_service.update_report_status(db, report_id, payload.status, admin_id)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except AdminServiceError as exc:
        _raise_http(exc)


# ─────────────────────────────────────────
# PATCH /admin/posts/{post_id}/status
# ─────────────────────────────────────────
@router.patch("/posts/{post_id}/status", response_model=UpdateResult)
def patch_post_status(
    post_id: str,
    payload: PostStatusUpdate,
    admin_id: str = Depends(require_admin_id),
    db: Session = Depends(get_db),
):
    return admin_service.update_post_status(db, post_id, payload.status)
