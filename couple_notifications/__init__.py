"""Push notifications for couple conversations, triggered by Firestore writes."""

__version__ = "1.0.0"
