from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_service import ReportLabPdfService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabPdfService",
]
