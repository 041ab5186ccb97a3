from tests.factories.document import DocumentFactory

__all__ = ["DocumentFactory"]
