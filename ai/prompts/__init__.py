from ai.prompts.system import SYSTEM_PROMPT

__all__ = ["SYSTEM_PROMPT"]
