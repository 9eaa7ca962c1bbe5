import pytest

from smarttransit.routers import contact as contact_router

FORM = {
    "name": "Asha",
    "email": "asha@example.com",
    "subject": "Route 3 timings",
    "message": "Does route 3 run on Sundays?",
    "category": "general",
}


@pytest.fixture(autouse=True)
def no_delay(monkeypatch):
    monkeypatch.setattr(contact_router, "SUBMIT_DELAY_SECONDS", 0)


def test_contact_page(client):
    body = client.get("/contact", params={"lang": "hi"}).json()
    assert body["form"]["fields"]["name"]["label"] == "पूरा नाम"
    assert [o["value"] for o in body["form"]["inquiryType"]["options"]] == ["general", "support", "feedback", "partnership"]
    assert len(body["info"]) == 4


def test_submit_succeeds(client):
    r = client.post("/contact", json=FORM)
    assert r.status_code == 200
    assert r.json()["status"] == "submitted"
    assert len(r.json()["reference"]) == 8


def test_optional_fields(client):
    form = {k: v for k, v in FORM.items() if k != "category"}
    assert client.post("/contact", json=form).status_code == 200


@pytest.mark.parametrize("field,value", [("email", "not-an-email"), ("name", ""), ("category", "spam")])
def test_submit_validation(client, field, value):
    assert client.post("/contact", json={**FORM, field: value}).status_code == 422
