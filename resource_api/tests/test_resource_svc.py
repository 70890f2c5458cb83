from resource_api.domain.result import Err, ErrorKind, Ok
from resource_api.services import resource_svc


def test_create_returns_ok_201():
    res = resource_svc.create_resource({"name": "svc"})
    assert isinstance(res, Ok)
    assert res.status == 201
    assert res.value == {"id": 1, "name": "svc", "description": None}


def test_error_kinds_are_tagged():
    bad = resource_svc.create_resource({"name": ""})
    assert isinstance(bad, Err) and bad.kind is ErrorKind.VALIDATION

    missing = resource_svc.get_resource("404")
    assert isinstance(missing, Err) and missing.kind is ErrorKind.NOT_FOUND
    assert missing.status == 404


def test_internal_error_is_logged(monkeypatch, caplog):
    def broken_conn(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(resource_svc, "get_conn", broken_conn)
    res = resource_svc.list_resources()
    assert isinstance(res, Err) and res.kind is ErrorKind.INTERNAL
    assert res.body == {"message": "Internal server error"}
    assert "Error in list_resources" in caplog.text


def test_update_echoes_numeric_id_as_int():
    created = resource_svc.create_resource({"name": "a"})
    rid = str(created.value["id"])
    res = resource_svc.update_resource(rid, {"name": "b", "description": "c"})
    assert res.value == {"id": int(rid), "name": "b", "description": "c"}
