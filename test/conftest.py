from typing import Dict, List, Optional

import pytest
from firebase_admin import firestore

from couple_notifications.config import Settings
from couple_notifications.firebase import ClientContext
from couple_notifications.notifications import NotificationPayload, TokenResult
from couple_notifications.users import UserDirectory


class FakeSnapshot:
    def __init__(self, data: Optional[dict]):
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, db: "FakeFirestore", collection: str, doc_id: str):
        self.db = db
        self.collection = collection
        self.id = doc_id

    def get(self):
        return FakeSnapshot(self.db.data.get(self.collection, {}).get(self.id))

    def update(self, fields: dict):
        doc = self.db.data[self.collection][self.id]
        self.db.updates.append((self.collection, self.id, fields))
        for key, value in fields.items():
            if isinstance(value, firestore.ArrayRemove):
                doc[key] = [v for v in doc.get(key, []) if v not in value.values]
            else:
                doc[key] = value


class FakeCollection:
    def __init__(self, db: "FakeFirestore", name: str):
        self.db = db
        self.name = name

    def document(self, doc_id: str) -> FakeDocument:
        return FakeDocument(self.db, self.name, doc_id)


class FakeFirestore:
    """In-memory stand-in for the parts of the Firestore client we use"""

    def __init__(self):
        self.data: Dict[str, Dict[str, dict]] = {}
        self.updates = []

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)

    def add_user(self, user_id: str, **fields):
        self.data.setdefault("users", {})[user_id] = fields

    def user(self, user_id: str) -> dict:
        return self.data["users"][user_id]


class FakeGateway:
    """Records sends; `errors` maps a token to the error code it fails with"""

    def __init__(self):
        self.errors: Dict[str, str] = {}
        self.calls: List[tuple] = []

    def send_multicast(self, tokens: List[str], payload: NotificationPayload) -> List[TokenResult]:
        self.calls.append((list(tokens), payload))
        results = []
        for token in tokens:
            code = self.errors.get(token)
            if code is None:
                results.append(TokenResult(token=token, success=True))
            else:
                results.append(TokenResult(token=token, success=False, error_code=code, error_message="failed"))
        return results


@pytest.fixture
def fake_db():
    db = FakeFirestore()
    db.add_user("alice", firstName="Alice", avatar="https://img/alice.png", partnerId="bob",
                fcmTokens=["alice-phone"])
    db.add_user("bob", firstName="Bob", avatar="https://img/bob.png", partnerId="alice",
                fcmTokens=["bob-phone", "bob-tablet"])
    db.add_user("carol", firstName="Carol", avatar=None, partnerId=None, fcmTokens=["carol-phone"])
    return db


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def context(fake_db, gateway):
    return ClientContext(users=UserDirectory(fake_db), gateway=gateway, settings=Settings())
