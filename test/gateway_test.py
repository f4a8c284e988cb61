import warnings
from types import SimpleNamespace

import pytest
from firebase_admin import exceptions, messaging

from couple_notifications.notifications import FcmGateway, NotificationPayload, NotificationView
from couple_notifications.notifications.gateway import DEAD_TOKEN_CODES, normalize_error_code


@pytest.fixture
def payload():
    return NotificationPayload.build(
        title="رسالة جديدة من Alice",
        body="hello",
        icon="https://img/alice.png",
        tag="chat_c1",
        view=NotificationView.CHAT,
    )


def _batch_response(responses):
    success_count = sum(1 for r in responses if r.success)
    return SimpleNamespace(
        responses=responses,
        success_count=success_count,
        failure_count=len(responses) - success_count,
    )


def _ok():
    return SimpleNamespace(success=True, exception=None)


def _failed(error):
    return SimpleNamespace(success=False, exception=error)


def test_build_message_maps_payload(payload):
    message = FcmGateway.build_message("t1", payload)
    assert message.token == "t1"
    assert message.notification.title == "رسالة جديدة من Alice"
    assert message.notification.body == "hello"
    assert message.android.notification.tag == "chat_c1"
    assert message.webpush.notification.icon == "https://img/alice.png"
    assert message.webpush.notification.tag == "chat_c1"
    assert message.data == {"view": "chat"}


def test_normalize_error_code():
    assert normalize_error_code(None) is None
    assert normalize_error_code(messaging.UnregisteredError("gone")) == "registration-token-not-registered"
    assert normalize_error_code(exceptions.InvalidArgumentError(
        "The registration token is not a valid FCM registration token")) == "invalid-registration-token"
    assert normalize_error_code(exceptions.InvalidArgumentError(
        "Request contains an invalid argument: message is too big")) == "invalid-argument"
    assert normalize_error_code(exceptions.UnavailableError("down")) == "unavailable"
    assert normalize_error_code(messaging.QuotaExceededError("slow down")) == "resource-exhausted"
    assert normalize_error_code(RuntimeError("boom")) == "unknown"


def test_only_dead_codes_are_dead():
    assert DEAD_TOKEN_CODES == {"invalid-registration-token", "registration-token-not-registered"}
    assert "unavailable" not in DEAD_TOKEN_CODES


def test_send_multicast_reports_per_token_results(monkeypatch, payload):
    sent = []

    def fake_send(messages, app=None):
        sent.append(messages)
        return _batch_response([
            _ok(),
            _failed(messaging.UnregisteredError("gone")),
            _failed(exceptions.UnavailableError("down")),
        ])

    monkeypatch.setattr(messaging, "send_each", fake_send)

    results = FcmGateway().send_multicast(["t1", "t2", "t3"], payload)

    assert len(sent) == 1
    assert [r.token for r in results] == ["t1", "t2", "t3"]
    assert results[0].success and results[0].error_code is None
    assert results[1].error_code == "registration-token-not-registered"
    assert results[2].error_code == "unavailable"
    assert "down" in results[2].error_message


def test_send_multicast_batches_tokens(monkeypatch, payload):
    batches = []

    def fake_send(messages, app=None):
        batches.append([m.token for m in messages])
        return _batch_response([_ok() for _ in messages])

    monkeypatch.setattr(messaging, "send_each", fake_send)

    results = FcmGateway(batch_size=2).send_multicast(["t1", "t2", "t3"], payload)

    assert batches == [["t1", "t2"], ["t3"]]
    assert all(r.success for r in results)


def test_send_multicast_passes_app(monkeypatch, payload):
    apps = []

    def fake_send(messages, app=None):
        apps.append(app)
        return _batch_response([_ok()])

    monkeypatch.setattr(messaging, "send_each", fake_send)
    app = object()
    FcmGateway(app).send_multicast(["t1"], payload)
    assert apps == [app]


def test_request_errors_propagate(monkeypatch, payload):
    def fake_send(messages, app=None):
        raise exceptions.UnauthenticatedError("bad credentials")

    monkeypatch.setattr(messaging, "send_each", fake_send)
    with pytest.raises(exceptions.UnauthenticatedError):
        FcmGateway().send_multicast(["t1"], payload)


def test_payload_level_invalid_argument_is_not_a_dead_token(monkeypatch, payload):
    def fake_send(messages, app=None):
        return _batch_response([
            _failed(exceptions.InvalidArgumentError("Request contains an invalid argument: message is too big"))
            for _ in messages
        ])

    monkeypatch.setattr(messaging, "send_each", fake_send)

    results = FcmGateway().send_multicast(["t1", "t2"], payload)

    assert [r.error_code for r in results] == ["invalid-argument", "invalid-argument"]
    assert not any(r.error_code in DEAD_TOKEN_CODES for r in results)


def test_send_builds_messages_without_deprecation_warnings(monkeypatch, payload):
    monkeypatch.setattr(messaging, "send_each", lambda messages, app=None: _batch_response([_ok() for _ in messages]))
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        results = FcmGateway().send_multicast(["t1", "t2"], payload)
    assert [r.token for r in results] == ["t1", "t2"]
