# Cloud Functions for Firebase loads triggers from main.py at the source root
from couple_notifications.main import (
    on_daily_question_answer,
    on_new_letter,
    on_new_memory,
    on_new_message,
)

__all__ = [
    "on_daily_question_answer",
    "on_new_letter",
    "on_new_memory",
    "on_new_message",
]
