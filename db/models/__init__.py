from db.models.base import Base
from db.models.document import Document

__all__ = ["Base", "Document"]
