"""
Admin service failures.

Read paths raise QueryFailure, write paths raise UpdateFailure. Both carry the
underlying database message so the HTTP layer can surface it.
"""


class AdminServiceError(Exception):
    """Base class for admin data-access failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class QueryFailure(AdminServiceError):
    """A list query could not be executed."""


class UpdateFailure(AdminServiceError):
    """A status update could not be applied."""


class ReportNotFound(AdminServiceError):
    """A report status update matched no rows."""

    def __init__(self, report_id: str):
        super().__init__(f"Report {report_id} not found")
        self.report_id = report_id
