from enums.answer import AnswerOutcome
from enums.llm import LLMName, Provider
from enums.mode import Mode
from enums.role import Role

__all__ = ["AnswerOutcome", "LLMName", "Provider", "Mode", "Role"]
