import pytest


def test_api_without_report_type(client):
    response = client.get("/api")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"Error": "No report type given"}


def test_metar_without_station(client):
    response = client.get("/api/metar")

    assert response.status_code == 404
    assert response.json() == {"Error": "No station given"}


def test_metar_for_known_station(client):
    response = client.get("/api/metar/KLEX")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "Station": "KLEX",
        "Report": "KLEX 123456Z 09013KT 13/11",
        "Time": "123456Z",
        "Wind-Speed": 13,
        "Wind-Direction": 90,
        "Temperature": 13,
        "Dewpoint": 11,
        "Units": {"Temperature": "C", "Wind-Speed": "kt"},
    }


@pytest.mark.parametrize("station", ["KLEX", "KMCO", "KSFB"])
def test_metar_accepts_every_listed_station(client, station):
    response = client.get(f"/api/metar/{station}")

    assert response.status_code == 200
    assert response.json()["Report"].startswith(f"{station} ")


def test_metar_echoes_opts(client):
    response = client.get("/api/metar/KLEX", params={"opts": "foo"})

    assert response.status_code == 200
    assert response.json()["opts"] == "foo"


def test_metar_echoes_empty_opts(client):
    data = client.get("/api/metar/KMCO?opts=").json()

    assert data["opts"] == ""


def test_metar_omits_opts_when_absent(client):
    assert "opts" not in client.get("/api/metar/KLEX").json()


@pytest.mark.parametrize("station", ["XXXX", "klex", "MCO", "KLEXX"])
def test_metar_rejects_unknown_station(client, station):
    """An invalid station gets a single 406 response and nothing else."""
    response = client.get(f"/api/metar/{station}")

    assert response.status_code == 406
    assert response.json() == {"Error": "Not a valid station"}


def test_process_station(client):
    response = client.post("/api/process", json={"Station": "KMCO"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Processing KMCO"


def test_process_does_not_check_allow_list(client):
    response = client.post("/api/process", json={"Station": "EGLL", "extra": 1})

    assert response.status_code == 200
    assert response.text == "Processing EGLL"


def test_process_accepts_json_media_type_variants(client):
    response = client.post(
        "/api/process",
        content=b'{"Station": "KSFB"}',
        headers={"Content-Type": "application/vnd.api+json; charset=utf-8"},
    )

    assert response.status_code == 200
    assert response.text == "Processing KSFB"


def test_process_without_body(client):
    response = client.post("/api/process")

    assert response.status_code == 400
    assert response.json() == {"Error": "No request body given"}


def test_process_with_non_json_body(client):
    response = client.post(
        "/api/process",
        content="Station=KMCO",
        headers={"Content-Type": "text/plain"},
    )

    assert response.status_code == 415
    assert response.json() == {"Error": "Request body must be JSON"}


def test_process_with_malformed_json(client):
    response = client.post(
        "/api/process",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"Error": "Malformed JSON body"}


@pytest.mark.parametrize("payload", [["KMCO"], "KMCO", 42])
def test_process_with_non_object_json(client, payload):
    response = client.post("/api/process", json=payload)

    assert response.status_code == 400
    assert response.json() == {"Error": "Request body must be a JSON object"}


@pytest.mark.parametrize("payload", [{}, {"Station": 5}, {"Station": None}, {"station": "KMCO"}])
def test_process_without_string_station(client, payload):
    response = client.post("/api/process", json=payload)

    assert response.status_code == 400
    assert response.json() == {"Error": "Station must be a string"}


def test_process_with_json_null(client):
    response = client.post(
        "/api/process",
        content="null",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"Error": "Request body must be a JSON object"}


def test_process_with_deeply_nested_json(client):
    response = client.post(
        "/api/process",
        content="[" * 100000 + "]" * 100000,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"Error": "Malformed JSON body"}
