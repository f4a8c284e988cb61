from .firebase import ClientContext, create_context, get_firebase_app

__all__ = ["ClientContext", "create_context", "get_firebase_app"]
