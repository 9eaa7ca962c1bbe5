def test_default_language(client):
    assert client.get("/language").json() == {"language": "en", "label": "English", "available": ["en", "hi"]}


def test_set_language_stores_cookie(client):
    r = client.put("/language", json={"language": "hi"})
    assert r.status_code == 200
    assert r.cookies.get("preferred-language") == "hi"
    assert client.get("/navigation").json()["language"] == "hi"
    assert client.get("/faq").json()["title"] == "अक्सर पूछे जाने वाले प्रश्न"


def test_query_beats_cookie(client):
    client.cookies.set("preferred-language", "hi")
    assert client.get("/language", params={"lang": "en"}).json()["language"] == "en"
    assert client.get("/language").json()["language"] == "hi"


def test_invalid_cookie_is_ignored(client):
    client.cookies.set("preferred-language", "fr")
    assert client.get("/language").json()["language"] == "en"


def test_invalid_language_rejected(client):
    assert client.put("/language", json={"language": "fr"}).status_code == 422


def test_toggle(client):
    r = client.post("/language/toggle")
    assert r.json()["language"] == "hi"
    assert r.json()["label"] == "हिंदी"
    assert client.post("/language/toggle").json()["language"] == "en"
