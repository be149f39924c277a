# moderation_admin/services/admin_service.py
"""
Admin Service Layer
Listing and moderation operations for users, posts and reports.

Every operation takes the caller's database session, issues its query and
maps database errors to QueryFailure / UpdateFailure.
"""

from __future__ import annotations

import logging
from datetime import datetime, UTC
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from moderation_admin.crud import admin_queries
from moderation_admin.exceptions import QueryFailure, ReportNotFound, UpdateFailure
from moderation_admin.models.enums import PostStatus, ReportStatus, TERMINAL_REPORT_STATUSES
from moderation_admin.models.report import Report
from moderation_admin.schemas.admin import PostListParams, ReportListParams, UserListParams

logger = logging.getLogger(__name__)


def _fetch_page(db: Session, stmt, count_stmt):
    rows = db.execute(stmt).scalars().all()
    count = db.execute(count_stmt).scalar()
    return list(rows), int(count or 0)


# ======================
# LISTINGS
# ======================

def list_users(db: Session, params: Optional[UserListParams] = None) -> Dict[str, Any]:
    """
    List users for the admin console.

    Args:
        db: Database session
        params: Page, page size, nickname/email search, role and tier filters

    Returns:
        {"users": [...], "count": total matching users}

    Raises:
        QueryFailure: If the database query fails
    """
    params = params or UserListParams()
    try:
        users, count = _fetch_page(
            db,
            admin_queries.build_users_query(params),
            admin_queries.count_query(admin_queries.users_filter(params)),
        )
    except SQLAlchemyError as exc:
        logger.exception("Error fetching users for admin")
        raise QueryFailure(f"Failed to fetch users: {exc}") from exc

    logger.info("Fetched %s users for admin (total: %s)", len(users), count)
    return {"users": users, "count": count}


def list_posts(db: Session, params: Optional[PostListParams] = None) -> Dict[str, Any]:
    """
    List posts of every status with their owner and tags.

    Posts whose owner no longer resolves are left out of both the page and
    the count.
    """
    params = params or PostListParams()
    logger.info("Fetching posts for admin: page=%s, limit=%s", params.page, params.limit)
    try:
        posts, count = _fetch_page(
            db,
            admin_queries.build_posts_query(params),
            admin_queries.count_query(admin_queries.posts_filter(params)),
        )
    except SQLAlchemyError as exc:
        logger.exception("Error fetching posts for admin")
        raise QueryFailure(f"Failed to fetch posts: {exc}") from exc

    logger.info("Fetched %s posts for admin (total: %s)", len(posts), count)
    return {"posts": posts, "count": count}


def list_reports(db: Session, params: Optional[ReportListParams] = None) -> Dict[str, Any]:
    """List reports, optionally by status, with post and reporter summaries."""
    params = params or ReportListParams()
    try:
        reports, count = _fetch_page(
            db,
            admin_queries.build_reports_query(params),
            admin_queries.count_query(admin_queries.reports_filter(params)),
        )
    except SQLAlchemyError as exc:
        logger.exception("Error fetching reports for admin")
        raise QueryFailure(f"Failed to fetch reports: {exc}") from exc

    logger.info("Fetched %s reports for admin (total: %s)", len(reports), count)
    return {"reports": reports, "count": count}


# ======================
# STATUS UPDATES
# ======================

def update_report_status(
    db: Session,
    report_id: str,
    status: ReportStatus,
    admin_id: str,
) -> Dict[str, Any]:
    """
    Move a report to a new status on behalf of an admin.

    resolver_admin_id is always overwritten with admin_id. resolved_at is
    stamped for resolved/dismissed and cleared for any other status.

    Args:
        db: Database session
        report_id: Report identifier
        status: New report status
        admin_id: Acting admin's user ID

    Returns:
        {"success": True}

    Raises:
        ValueError: If report_id is empty
        ReportNotFound: If no report has this id
        UpdateFailure: If the database update fails
    """
    if not report_id or not str(report_id).strip():
        raise ValueError("report_id is required")

    status = ReportStatus(status)
    update_data = {
        "status": status.value,
        "resolver_admin_id": admin_id,
        "resolved_at": datetime.now(UTC) if status in TERMINAL_REPORT_STATUSES else None,
    }

    try:
        updated = db.query(Report).filter(
            Report.id == report_id,
        ).update(update_data, synchronize_session=False)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error updating report %s status for admin", report_id)
        raise UpdateFailure(f"Failed to update report status: {exc}") from exc

    if not updated:
        logger.warning("Report %s not found for status update", report_id)
        raise ReportNotFound(report_id)

    logger.info("Report %s status updated to %s by admin %s", report_id, status.value, admin_id)
    return {"success": True}


def update_post_status(db: Session, post_id: str, status: PostStatus) -> Dict[str, Any]:
    # TODO: persist the status once the rejection flow defines which post fields change.
    status = PostStatus(status)
    logger.warning(
        "Post status update not persisted (post_id=%s, status=%s)",
        post_id,
        status.value,
    )
    return {"success": True}
