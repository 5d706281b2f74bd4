from quizmeonit.config import settings


def test_random_topic_ok(client, gateway):
    gateway.reply = '{"topic": "ancient rome"}'

    response = client.post("/api/get-random-topic", json={"difficulty": "College"})

    assert response.status_code == 200
    assert response.json() == {"topic": "ancient rome"}
    assert "difficulty level: College" in gateway.calls[0]["prompt"]


def test_random_topic_uses_topic_temperature(client, gateway):
    gateway.reply = '{"topic": "volcanoes"}'
    settings.topic_temperature = 0.9

    client.post("/api/get-random-topic", json={"difficulty": "Elementary"})

    assert gateway.calls[0]["temperature"] == 0.9


def test_random_topic_default_temperature_is_elevated(client, gateway):
    gateway.reply = '{"topic": "volcanoes"}'

    client.post("/api/get-random-topic", json={"difficulty": "Elementary"})

    assert gateway.calls[0]["temperature"] == 1.1


def test_missing_difficulty(client, gateway):
    response = client.post("/api/get-random-topic", json={})

    assert response.status_code == 400
    assert gateway.calls == []


def test_malformed_topic_reply(client, gateway):
    gateway.reply = "How about ancient Rome?"

    response = client.post("/api/get-random-topic", json={"difficulty": "College"})

    assert response.status_code == 500
    assert response.json()["rawResponse"] == "How about ancient Rome?"


def test_topic_reply_with_wrong_shape(client, gateway):
    gateway.reply = '{"topics": ["ancient rome"]}'

    response = client.post("/api/get-random-topic", json={"difficulty": "College"})

    assert response.status_code == 500
    body = response.json()
    assert "string 'topic' key" in body["error"]
    assert body["data"] == {"topics": ["ancient rome"]}


def test_topic_invalid_api_key(client, gateway):
    gateway.error = ValueError("API key not valid")

    response = client.post("/api/get-random-topic", json={"difficulty": "College"})

    assert response.status_code == 401


def test_nan_in_topic_reply_returns_diagnostics(client, gateway):
    gateway.reply = '{"topic": NaN}'

    response = client.post("/api/get-random-topic", json={"difficulty": "College"})

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert body["rawResponse"] == '{"topic": NaN}'
    assert "NaN" in body["parseError"]
