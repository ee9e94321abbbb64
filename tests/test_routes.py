import pytest
import httpx
from fastapi.routing import APIRoute
from httpx import ASGITransport
from main import app


# ✅ erlaubte Statuscodes
ALLOWED = {200}


@pytest.mark.asyncio
async def test_all_get_routes():
    """Testet alle GET-Routen der FastAPI-App."""
    transport = ASGITransport(app=app)
    client = httpx.AsyncClient(transport=transport, base_url="http://test")

    failed = []

    for route in app.routes:
        if not isinstance(route, APIRoute):
            continue
        if "GET" not in route.methods:
            continue
        if "{" in route.path:
            continue

        response = await client.get(route.path)
        if response.status_code not in ALLOWED:
            failed.append((route.path, response.status_code))

    await client.aclose()

    assert not failed, (
        "\n\n❌ FEHLERHAFTE ROUTEN GEFUNDEN:\n" +
        "\n".join([f"  - {path}: {err}" for path, err in failed]) +
        "\n"
    )


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_every_tool_has_payload_and_png_route(client):
    paths = {item["path"] for item in (await client.get("/debug/routes")).json()}
    for tool in ("wifi", "vcard", "event", "geo", "messaging", "email", "payment", "text"):
        assert f"/qr/{tool}/payload" in paths
        assert f"/qr/{tool}/png" in paths


@pytest.mark.asyncio
async def test_wifi_payload(client):
    response = await client.post(
        "/qr/wifi/payload",
        data={"ssid": "Home", "password": "password123", "encryption": "WPA"},
    )
    assert response.status_code == 200
    assert response.json() == {"type": "wifi", "payload": "WIFI:T:WPA;S:Home;P:password123;H:false;;"}


@pytest.mark.asyncio
async def test_failure_becomes_422(client):
    response = await client.post("/qr/wifi/payload", data={"ssid": "a" * 33, "password": "password123"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "FormatInvalid"
    assert detail["field"] == "ssid"


@pytest.mark.asyncio
async def test_wifi_png(client):
    response = await client.post(
        "/qr/wifi/png",
        data={"ssid": "Home", "password": "password123", "style": "dots", "size": "256"},
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


@pytest.mark.asyncio
async def test_png_size_is_limited(client):
    response = await client.post("/qr/text/png", data={"content": "hi", "size": "10"})
    assert response.status_code == 422
    assert response.json()["detail"]["field"] == "size"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "data",
    [
        {"content": "日" * 2000},
        {"content": "a" * 2000, "style": "print"},
        {"content": "a" * 2000, "error_correction": "H"},
    ],
)
async def test_png_rejects_content_beyond_qr_capacity(client, data):
    response = await client.post("/qr/text/png", data=data)
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "FormatInvalid"
    assert detail["field"] == "payload"
    assert detail["message"] == "Content is too large for a QR code at this error-correction level"


@pytest.mark.asyncio
async def test_long_text_still_renders_at_default_level(client):
    response = await client.post("/qr/text/png", data={"content": "a" * 2000})
    assert response.status_code == 200
    assert response.content.startswith(b"\x89PNG")


@pytest.mark.asyncio
async def test_vcard_payload(client):
    response = await client.post("/qr/vcard/payload", data={"first_name": "Jane", "last_name": "Doe"})
    assert response.json()["payload"] == "BEGIN:VCARD\nVERSION:3.0\nN:Doe;Jane;;;\nFN:Jane Doe\nEND:VCARD"


@pytest.mark.asyncio
async def test_event_payload(client):
    response = await client.post(
        "/qr/event/payload",
        data={
            "title": "Launch",
            "start_date": "2024-05-01",
            "end_date": "2024-05-01",
            "start_time": "09:00",
            "end_time": "10:00",
            "timezone": "UTC",
        },
    )
    assert response.status_code == 200
    assert "DTSTART:20240501T090000Z" in response.json()["payload"]


@pytest.mark.asyncio
async def test_event_end_before_start(client):
    response = await client.post(
        "/qr/event/payload",
        data={"title": "x", "start_date": "2024-05-02", "end_date": "2024-05-01", "all_day": "true"},
    )
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "OutOfRange"


@pytest.mark.asyncio
async def test_event_bad_date_format(client):
    response = await client.post("/qr/event/payload", data={"title": "x", "start_date": "01.05.2024"})
    assert response.status_code == 422
    assert response.json()["detail"]["field"] == "start_date"


@pytest.mark.asyncio
async def test_geo_parse(client):
    response = await client.post("/qr/geo/parse", data={"url": "https://www.google.com/maps/@40.7128,-74.0060,15z"})
    assert response.json() == {
        "latitude": 40.7128,
        "longitude": -74.006,
        "type": "geo",
        "payload": "geo:40.712800,-74.006000",
    }


@pytest.mark.asyncio
async def test_geo_short_link(client):
    response = await client.post("/qr/geo/parse", data={"url": "https://maps.app.goo.gl/xyz"})
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "ShortUrlNotSupported"


@pytest.mark.asyncio
async def test_geo_payload_requires_numbers(client):
    response = await client.post("/qr/geo/payload", data={"latitude": "north", "longitude": "1"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_messaging_payload(client):
    response = await client.post(
        "/qr/messaging/payload",
        data={"platform": "sms", "phone": "5551234567", "message": "Hi"},
    )
    body = response.json()
    assert body["payload"] == "SMSTO:+15551234567:Hi"
    assert body["display_phone"] == "+1 (555) 123-4567"


@pytest.mark.asyncio
async def test_email_payload_and_decode(client):
    response = await client.post("/qr/email/payload", data={"email_address": "a@b.de", "subject": "Hi"})
    payload = response.json()["payload"]
    assert payload == "mailto:a%40b.de?subject=Hi"

    decoded = await client.post("/qr/email/decode", data={"payload": payload})
    assert decoded.json() == {"recipient": "a@b.de", "subject": "Hi", "body": None}


@pytest.mark.asyncio
async def test_payment_payload(client):
    response = await client.post(
        "/qr/payment/payload",
        data={"payment_type": "upi", "upi_id": "foo@bank", "payee_name": "Jane Doe", "amount": "100"},
    )
    assert response.json() == {
        "type": "payment",
        "payload": "upi://pay?pa=foo@bank&pn=Jane%20Doe&am=100&cu=INR",
        "kind": "upi",
    }


@pytest.mark.asyncio
async def test_payment_checksum_failure(client):
    response = await client.post(
        "/qr/payment/payload",
        data={"payment_type": "iban", "iban_code": "DE89370400440532013001", "beneficiary_name": "Max"},
    )
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "ChecksumInvalid"


@pytest.mark.asyncio
async def test_payment_unknown_type(client):
    response = await client.post("/qr/payment/payload", data={"payment_type": "cash"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_payment_decode(client):
    response = await client.post(
        "/qr/payment/decode",
        data={"payload": "bitcoin:1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa?amount=0.5"},
    )
    assert response.json() == {
        "kind": "bitcoin",
        "address": "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa",
        "amount": "0.5",
        "label": None,
        "message": None,
    }


@pytest.mark.asyncio
async def test_text_analyze(client):
    response = await client.post("/qr/text/analyze", data={"content": "a" * 60})
    body = response.json()
    assert body["complexity"] == {"level": "low", "score": 1, "factors": ["Medium length text"]}
    assert body["stats"]["estimated_size"] == "medium"
    assert body["warnings"] == []


@pytest.mark.asyncio
async def test_openapi_documents_failure_schema(client):
    schema = (await client.get("/openapi.json")).json()
    assert "FailureOut" in schema["components"]["schemas"]
    wifi_post = schema["paths"]["/qr/wifi/payload"]["post"]
    assert "422" in wifi_post["responses"]
