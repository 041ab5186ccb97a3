from db.repositories.document import DocumentRepository

__all__ = ["DocumentRepository"]
