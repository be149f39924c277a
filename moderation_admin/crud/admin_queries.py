# moderation_admin/crud/admin_queries.py
"""
Admin query builders.

Each builder maps a ListParams object to a finalized SQLAlchemy Select. The
Select API is generative, so every filter step returns a new statement and the
builders have no side effects.
"""

from typing import Tuple

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import contains_eager, joinedload, selectinload

from moderation_admin.models.post import Post
from moderation_admin.models.report import Report
from moderation_admin.models.user import User
from moderation_admin.schemas.admin import PostListParams, ReportListParams, UserListParams


def page_range(page: int, limit: int) -> Tuple[int, int]:
    """Zero-indexed inclusive row range for a 1-indexed page."""
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")
    start = (page - 1) * limit
    end = start + limit - 1
    return start, end


def apply_page(stmt: Select, page: int, limit: int) -> Select:
    start, end = page_range(page, limit)
    return stmt.offset(start).limit(end - start + 1)


def count_query(stmt: Select) -> Select:
    """Exact count of the rows `stmt` matches, ignoring order and paging."""
    filtered = stmt.order_by(None).limit(None).offset(None)
    return select(func.count()).select_from(filtered.subquery())


def users_filter(params: UserListParams) -> Select:
    stmt = select(User)
    if params.search:
        # % and _ in the search text match literally
        stmt = stmt.where(or_(
            User.nickname.icontains(params.search, autoescape=True),
            User.email.icontains(params.search, autoescape=True),
        ))
    if params.role:
        stmt = stmt.where(User.role == params.role.value)
    if params.tier:
        stmt = stmt.where(User.tier == params.tier.value)
    return stmt


def build_users_query(params: UserListParams) -> Select:
    stmt = users_filter(params).order_by(User.created_at.desc(), User.id.desc())
    return apply_page(stmt, params.page, params.limit)


def posts_filter(params: PostListParams) -> Select:
    # All statuses are listed; the owner join is INNER so orphaned posts drop out.
    return select(Post).join(Post.owner)


def build_posts_query(params: PostListParams) -> Select:
    stmt = (
        posts_filter(params)
        .options(contains_eager(Post.owner), selectinload(Post.tags))
        .order_by(Post.created_at.desc(), Post.id.desc())
    )
    return apply_page(stmt, params.page, params.limit)


def reports_filter(params: ReportListParams) -> Select:
    stmt = select(Report)
    if params.status:
        stmt = stmt.where(Report.status == params.status.value)
    return stmt


def build_reports_query(params: ReportListParams) -> Select:
    stmt = (
        reports_filter(params)
        .options(
            joinedload(Report.post).load_only(Post.id, Post.title),
            joinedload(Report.reporter).load_only(User.id, User.nickname),
        )
        .order_by(Report.created_at.desc(), Report.id.desc())
    )
    return apply_page(stmt, params.page, params.limit)
