from .daily_questions import find_new_answerers, on_daily_question_answer
from .letters import on_new_letter
from .memories import on_new_memory
from .messages import on_new_message

__all__ = [
    "find_new_answerers",
    "on_daily_question_answer",
    "on_new_letter",
    "on_new_memory",
    "on_new_message",
]
