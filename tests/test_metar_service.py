import pytest

from meetup_demo.core.exceptions import InvalidPayloadError, InvalidStationError
from meetup_demo.core.validators import (
    VALID_STATIONS,
    decode_text,
    validate_process_payload,
    validate_station,
)
from meetup_demo.services import metar_service
from meetup_demo.services.metar_service import (
    MetarService,
    get_metar_service,
    reset_metar_service,
)


@pytest.fixture
def service():
    return MetarService()


def test_lookup_builds_stub_report(service):
    report = service.lookup("KMCO")

    assert report.station == "KMCO"
    assert report.report == "KMCO 123456Z 09013KT 13/11"
    assert report.time == "123456Z"
    assert (report.wind_speed, report.wind_direction) == (13, 90)
    assert (report.temperature, report.dewpoint) == (13, 11)
    assert report.units.temperature == "C"
    assert report.units.wind_speed == "kt"
    assert report.opts is None


def test_lookup_serializes_with_wire_names(service):
    data = service.lookup("KSFB", opts="raw").model_dump(by_alias=True)

    assert data["Wind-Speed"] == 13
    assert data["Units"] == {"Temperature": "C", "Wind-Speed": "kt"}
    assert data["opts"] == "raw"


def test_lookup_rejects_unknown_station(service):
    with pytest.raises(InvalidStationError) as excinfo:
        service.lookup("KJFK")

    assert excinfo.value.status_code == 406
    assert excinfo.value.to_dict() == {"Error": "Not a valid station"}
    assert excinfo.value.station == "KJFK"


def test_process_returns_station(service):
    assert service.process({"Station": "KLEX"}) == "KLEX"


def test_process_rejects_bad_payload(service):
    with pytest.raises(InvalidPayloadError) as excinfo:
        service.process({"Station": ["KLEX"]})

    assert excinfo.value.status_code == 400
    assert excinfo.value.to_dict() == {"Error": "Station must be a string"}


def test_service_singleton():
    reset_metar_service()
    first = get_metar_service()

    assert get_metar_service() is first
    reset_metar_service()
    assert get_metar_service() is not first


def test_validate_station():
    assert VALID_STATIONS == ("KLEX", "KMCO", "KSFB")
    assert validate_station("KLEX") == (True, None)
    assert validate_station("") == (False, "Not a valid station")


def test_decode_text():
    assert decode_text(None) == ""
    assert decode_text(b"") == ""
    assert decode_text("Zoë".encode("utf-8")) == "Zoë"


def test_validate_process_payload():
    assert validate_process_payload({"Station": "X"}) == (True, "X", None)
    assert validate_process_payload([]) == (False, "", "Request body must be a JSON object")
    assert validate_process_payload({"Station": 1}) == (False, "", "Station must be a string")


def test_lookup_reports_validator_message(service, monkeypatch):
    monkeypatch.setattr(
        metar_service, "validate_station", lambda station: (False, "Station not served")
    )

    with pytest.raises(InvalidStationError) as excinfo:
        service.lookup("KLEX")

    assert excinfo.value.to_dict() == {"Error": "Station not served"}
