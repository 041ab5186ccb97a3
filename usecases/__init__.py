from usecases.chat import ChatUsecase
from usecases.document import DocumentUsecase
from usecases.health import HealthUsecase

__all__ = [
    "HealthUsecase",
    "DocumentUsecase",
    "ChatUsecase",
]
