from dataclasses import replace
from decimal import Decimal

from fastapi.testclient import TestClient

from enemturbo.client.main import create_app


def test_health(settings) -> None:
    client = TestClient(create_app(settings))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "ENEM Turbo"}


def test_home_renders_product_and_call_to_action(settings) -> None:
    client = TestClient(create_app(replace(settings, product_name="Course", product_price=Decimal("99.90"))))

    response = client.get("/")

    assert response.status_code == 200
    assert "Course" in response.text
    assert "99,90" in response.text
    assert 'href="/checkout"' in response.text


def test_checkout_page_points_form_at_relay(settings) -> None:
    client = TestClient(create_app(settings))

    response = client.get("/checkout")

    assert response.status_code == 200
    assert 'data-relay-url="http://relay.test"' in response.text
    assert 'data-price="99.90"' in response.text
    assert "js/checkout.js" in response.text


def test_success_page_shows_session_id(settings) -> None:
    client = TestClient(create_app(settings))

    response = client.get("/success", params={"session_id": "cs_test_42"})

    assert response.status_code == 200
    assert "cs_test_42" in response.text


def test_success_page_without_session_id(settings) -> None:
    client = TestClient(create_app(settings))

    response = client.get("/success")

    assert response.status_code == 200
    assert "<code>" not in response.text


def test_cancel_page_links_back_to_checkout(settings) -> None:
    client = TestClient(create_app(settings))

    response = client.get("/cancel")

    assert response.status_code == 200
    assert 'href="/checkout"' in response.text


def test_static_assets_are_served(settings) -> None:
    client = TestClient(create_app(settings))

    pdf = client.get("/static/enemturbo.pdf")
    script = client.get("/static/js/checkout.js")

    assert pdf.status_code == 200
    assert pdf.content.startswith(b"%PDF")
    assert script.status_code == 200
    assert "/create-checkout-session" in script.text
