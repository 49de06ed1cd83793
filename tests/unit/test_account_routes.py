"""Tests for the account activation endpoints."""

import logging

from consent_portal.core.security import token_service
from consent_portal.dtos.account_dtos import ActivationResultDTO


def _form(**overrides):
    form = {
        "email": "user1@example.com",
        "password": "password",
        "password_confirmation": "password",
        "client_id": "app",
    }
    form.update(overrides)
    return form


def test_create_account_sends_activation_email(client, activation_client):
    response = client.post("/create_account", data=_form(), follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "accounts/email_sent"
    assert activation_client.begin_calls == [("user1@example.com", "password", "app")]


def test_create_account_with_existing_username(client, activation_client):
    activation_client.existing_emails.add("user1@example.com")

    response = client.post("/create_account", data=_form(), follow_redirects=False)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "username_exists"


def test_create_account_with_invalid_email(client, activation_client):
    response = client.post("/create_account", data=_form(email="wrong"))

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "invalid_email"
    assert activation_client.begin_calls == []


def test_create_account_with_password_mismatch(client, activation_client):
    response = client.post(
        "/create_account", data=_form(password="pass", password_confirmation="word")
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "form_error"
    assert activation_client.begin_calls == []


def test_verify_user_redirects_and_issues_principal(client, activation_client):
    activation_client.activations["the_secret_code"] = ActivationResultDTO(
        user_id="newly-created-user-id",
        username="username",
        email="user@example.com",
        redirect_url="//example.com/callback",
    )

    response = client.get(
        "/verify_user", params={"code": "the_secret_code"}, follow_redirects=False
    )

    assert response.status_code == 302
    assert response.headers["location"] == "//example.com/callback"
    cookie = response.headers["set-cookie"]
    assert cookie.startswith("access_token=")
    assert "HttpOnly" in cookie
    token = cookie.split(";", 1)[0].split("=", 1)[1]
    payload = token_service.verify_access_token(token)
    assert payload.user_id == "newly-created-user-id"
    assert payload.username == "username"
    assert payload.email == "user@example.com"


def test_verify_user_without_redirect_goes_home(client, activation_client):
    activation_client.activations["the_secret_code"] = ActivationResultDTO(
        user_id="newly-created-user-id",
        username="username",
        email="user@example.com",
    )

    response = client.get(
        "/verify_user", params={"code": "the_secret_code"}, follow_redirects=False
    )

    assert response.status_code == 302
    assert response.headers["location"] == "home"


def test_verify_user_with_unknown_code(client):
    response = client.get("/verify_user", params={"code": "expired"})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "code_expired"


def test_new_account_form_echoes_client_id(client):
    response = client.get("/create_account", params={"client_id": "app"})

    assert response.status_code == 200
    assert response.json()["data"] == {"client_id": "app"}


def test_refused_activation_is_logged(client, activation_client, caplog):
    activation_client.existing_emails.add("user1@example.com")

    with caplog.at_level(logging.INFO, logger="consent_portal.api.routes.account_routes"):
        client.post("/create_account", data=_form(), follow_redirects=False)

    assert "username_exists" in caplog.text
