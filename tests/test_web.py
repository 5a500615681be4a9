import json
import logging
from dataclasses import dataclass
from unittest import mock

import pytest

from coreledger.config import CommonConfig, Config, VersionConfig
from coreledger.constants import constant_group, constants_payload
from coreledger.web import (
    Application,
    InMemoryTransactionRepository,
    TransactionService,
    create_app,
    main,
    register_transaction_routes,
    wrap_response,
)


class FailingRepository:
    def get_list(self):
        raise RuntimeError("database unavailable")


@dataclass
class Txn:
    id: int
    amount: float


def make_client(transactions=()):
    service = TransactionService(InMemoryTransactionRepository(transactions))
    app = create_app(service=service, config=Config())
    return app.test_client()


def test_root_route():
    response = make_client().get("/")
    assert response.status_code == 200
    assert response.get_json() == {
        "data": {"status": "success", "message": "Core Ledger API is running"}
    }


def test_health_route():
    response = make_client().get("/health")
    assert response.status_code == 200
    assert response.get_json()["data"]["message"] == "Wealify API is running"


def test_transactions_list():
    items = [{"id": 1, "amount": 10.0}, {"id": 2, "amount": 5.5}]
    response = make_client(items).get("/api/v2/transactions")
    assert response.status_code == 200
    assert response.get_json() == {"data": items}


def test_transactions_list_serialises_dataclasses():
    response = make_client([Txn(id=7, amount=2.5)]).get("/api/v2/transactions")
    assert response.get_json() == {"data": [{"id": 7, "amount": 2.5}]}


def test_transactions_error_returns_500():
    app = create_app(service=TransactionService(FailingRepository()), config=Config())
    response = app.test_client().get("/api/v2/transactions")
    assert response.status_code == 500
    assert response.get_json() == {
        "error": "internal server error ",
        "err": "database unavailable",
    }


@pytest.mark.parametrize("base", ["/api/v2/constants", "/api/v2/cms/constants"])
def test_all_constants(base):
    response = make_client().get(base)
    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] is True
    assert body["data"] == constants_payload()


@pytest.mark.parametrize(
    "suffix,group",
    [
        ("/account-levels", "account_level"),
        ("/account-types", "account_type"),
        ("/providers", "provider"),
        ("/providers-types", "provider_type"),
    ],
)
@pytest.mark.parametrize("base", ["/api/v2/constants", "/api/v2/cms/constants"])
def test_constant_groups(base, suffix, group):
    response = make_client().get(base + suffix)
    assert response.status_code == 200
    assert response.get_json() == {"status": True, "data": constant_group(group)}


def test_cors_headers_present():
    response = make_client().get("/health")
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert "OPTIONS" in response.headers["Access-Control-Allow-Methods"]


def test_options_preflight_returns_204():
    response = make_client().options("/api/v2/transactions")
    assert response.status_code == 204
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_register_transaction_routes_custom_prefix():
    from flask import Flask

    app = Flask("t")
    register_transaction_routes(app, TransactionService(InMemoryTransactionRepository([{"id": 3}])), "/v9")
    response = app.test_client().get("/v9/transactions")
    assert response.get_json() == {"data": [{"id": 3}]}


def test_service_lists_repository_contents(caplog):
    repo = InMemoryTransactionRepository([{"id": 1}])
    repo.add({"id": 2})
    service = TransactionService(repo)
    with caplog.at_level(logging.INFO):
        result = service.list_transactions()
    assert result == [{"id": 1}, {"id": 2}]
    assert "Fetched 2 transactions" in caplog.text


def test_service_propagates_errors():
    with pytest.raises(RuntimeError, match="database unavailable"):
        TransactionService(FailingRepository()).list_transactions()


def test_repository_returns_copy():
    repo = InMemoryTransactionRepository([{"id": 1}])
    listed = repo.get_list()
    listed.append({"id": 99})
    assert repo.get_list() == [{"id": 1}]


def test_application_lifecycle_logs(caplog):
    app = Application()
    with caplog.at_level(logging.INFO):
        app.run()
        app.shutdown()
    assert "Application started" in caplog.text
    assert "Application stopped" in caplog.text


def _config():
    return Config(
        common=CommonConfig(name="ledger", mode="test"),
        version=VersionConfig(code=3, name="v3", path="/v3"),
    )


def test_wrap_response_object_body():
    wrapped = wrap_response(b'{"a": 1}', 200, _config())
    assert wrapped["code"] == 200
    assert wrapped["data"] == {"a": 1}
    assert wrapped["error"] == {"message": ""}
    assert wrapped["system"]["name"] == "ledger"
    assert wrapped["system"]["mode"] == "test"
    assert wrapped["system"]["version"] == {"code": 3, "name": "v3", "path": "/v3"}


def test_wrap_response_array_body():
    wrapped = wrap_response('[1, {"b": 2}]', 201, _config())
    assert wrapped["data"] == [1, {"b": 2}]
    assert wrapped["code"] == 201


def test_wrap_response_string_body_becomes_message():
    wrapped = wrap_response(json.dumps("went wrong"), 400, _config())
    assert wrapped["data"] is None
    assert wrapped["error"]["message"] == "went wrong"


def test_wrap_response_invalid_body():
    wrapped = wrap_response(b"", 204, _config())
    assert wrapped["data"] is None
    assert wrapped["error"]["message"] == ""
    assert wrapped["system"]["timezone"].endswith("+00:00")


def test_main_runs_server_on_given_port(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("flask.Flask.run") as run:
        assert main(["--port", "9001", "--host", "127.0.0.1"]) == 0
    run.assert_called_once_with(host="127.0.0.1", port=9001)


def test_main_rejects_bad_port(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["--port", "abc"])
    assert excinfo.value.code == 2