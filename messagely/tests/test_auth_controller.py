from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from messagely.application.use_cases.users.login_user import LoginUserUseCase
from messagely.application.use_cases.users.register_user import RegisterUserUseCase
from messagely.domain.users.entities import UserProfile
from messagely.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from messagely.interfaces.http.controllers.auth_controller import AuthController
from messagely.shared.middleware.error_handler import configure_error_handling

REGISTER_PAYLOAD = {
    "username": "alice",
    "password": "secret123",
    "first_name": "Alice",
    "last_name": "Smith",
    "phone": "555-0100",
}


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_register_endpoint_returns_token(flask_app: Flask) -> None:
    register_called: dict[str, object] = {}

    class StubRegister:
        def execute(self, username: str, password: str, **profile: str):
            register_called["args"] = (username, password)
            register_called["profile"] = profile
            return UserProfile(username=username, **profile), "token123"

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json=REGISTER_PAYLOAD)

    assert response.status_code == 201
    assert response.get_json() == {"token": "token123"}
    assert register_called["args"] == ("alice", "secret123")
    assert register_called["profile"] == {
        "first_name": "Alice",
        "last_name": "Smith",
        "phone": "555-0100",
    }


def test_register_duplicate_maps_to_username_taken(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError("alice")
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json=REGISTER_PAYLOAD)

    assert response.status_code == 400
    assert response.get_json() == {"error": "username_taken", "context": {"username": "alice"}}


@pytest.mark.parametrize(
    ("override", "field"),
    [
        ({"username": ""}, "username"),
        ({"username": "bad name!"}, "username"),
        ({"password": "short"}, "password"),
        ({"password": " padded-password "}, "password"),
        ({"first_name": "   "}, "first_name"),
        ({"phone": None}, "phone"),
    ],
)
def test_register_validation_errors(flask_app: Flask, override: dict, field: str) -> None:
    register = MagicMock()
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json={**REGISTER_PAYLOAD, **override})

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "validation_error"
    assert field in body["context"]["fields"]
    register.execute.assert_not_called()


def test_login_endpoint_returns_token(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = "token456"
    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=cast(LoginUserUseCase, login),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"username": "alice", "password": "secret123"}
        )

    assert response.status_code == 200
    assert response.get_json() == {"token": "token456"}
    login.execute.assert_called_once_with("alice", "secret123")


def test_login_invalid_credentials(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(register_use_case=MagicMock(), login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"username": "alice", "password": "wrong"}
        )

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}


def test_login_rejects_non_json_body(flask_app: Flask) -> None:
    controller = AuthController(register_use_case=MagicMock(), login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", data="not json")

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"
