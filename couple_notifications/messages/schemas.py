from enum import Enum


class MessageType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    KISS = "kiss"
    HEARTBEAT_PULSE = "heartbeat_pulse"
