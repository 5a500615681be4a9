"""The HTTP application: routes, response wrapping and the server entry point."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from flask import Flask, Response, jsonify, request

from .config import Config, get_config
from .constants import constant_group, constants_payload
from .ratelimit import RateLimitMiddleware

API_PREFIX = "/api/v2"
DEFAULT_PORT = "8080"

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Origin, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization"
    ),
}

_CONSTANT_ROUTES = (
    ("", "all", None),
    ("/account-levels", "account_levels", "account_level"),
    ("/account-types", "account_types", "account_type"),
    ("/providers", "providers", "provider"),
    ("/providers-types", "provider_types", "provider_type"),
)

_log = logging.getLogger(__name__)


class Application:
    """Lifecycle hooks of the service."""

    def __init__(self) -> None:
        self._log = logging.getLogger("coreledger.application")

    def run(self) -> None:
        """Announce that the application has started."""
        self._log.info("🚀 Application started...")

    def shutdown(self) -> None:
        """Announce that the application has stopped."""
        self._log.info("🛑 Application stopped.")


class InMemoryTransactionRepository:
    """A transaction store held in memory."""

    def __init__(self, transactions: Iterable[Any] = ()) -> None:
        self._transactions = list(transactions)

    def add(self, transaction: Any) -> None:
        """Store one more transaction."""
        self._transactions.append(transaction)

    def get_list(self) -> list[Any]:
        """Return every stored transaction, in insertion order."""
        return list(self._transactions)


class TransactionService:
    """Business operations on transactions."""

    def __init__(self, repository: Any, user_repository: Any = None) -> None:
        self.repository = repository
        self.user_repository = user_repository
        self._log = logging.getLogger("coreledger.transactions")

    def list_transactions(self) -> list[Any]:
        """Return all transactions from the repository."""
        transactions = self.repository.get_list()
        self._log.info("Fetched %d transactions", len(transactions))
        return transactions


def _to_json(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def wrap_response(
    body: Union[bytes, str],
    status: int,
    config: Optional[Config] = None,
) -> dict[str, Any]:
    """Wrap a JSON response body in the standard envelope.

    An object or array body becomes ``data``; a string body becomes the error
    message; anything else leaves both empty.
    """
    cfg = config if config is not None else get_config()
    text = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else body
    try:
        parsed = json.loads(text)
    except ValueError as exc:
        _log.error("cannot decode response body: %s", exc)
        parsed = None
    data = parsed if isinstance(parsed, (dict, list)) else None
    message = parsed if isinstance(parsed, str) else ""
    return {
        "code": status,
        "data": data,
        "error": {"message": message},
        "system": {
            "name": cfg.common.name,
            "mode": cfg.common.mode,
            "version": {
                "code": cfg.version.code,
                "name": cfg.version.name,
                "path": cfg.version.path,
            },
            "timezone": datetime.now(timezone.utc).isoformat(),
        },
    }


def _constant_view(group: Optional[str]) -> Callable[[], Response]:
    def view() -> Response:
        data = constants_payload() if group is None else constant_group(group)
        return jsonify({"status": True, "data": data})

    return view


def register_constant_routes(app: Flask) -> None:
    """Add the client and CMS constants endpoints under the API prefix."""
    for scope, base in (("api", f"{API_PREFIX}/constants"), ("cms", f"{API_PREFIX}/cms/constants")):
        for suffix, name, group in _CONSTANT_ROUTES:
            app.add_url_rule(
                base + suffix,
                endpoint=f"{scope}_constants_{name}",
                view_func=_constant_view(group),
                methods=["GET"],
            )


def register_transaction_routes(app: Flask, service: TransactionService, prefix: str = API_PREFIX) -> None:
    """Add the transaction endpoints under ``prefix``."""

    def list_transactions() -> Any:
        try:
            transactions = service.list_transactions()
        except Exception as exc:
            _log.error("failed to get transaction list: %s", exc)
            return jsonify({"error": "internal server error ", "err": str(exc)}), 500
        return jsonify({"data": [_to_json(item) for item in transactions]})

    app.add_url_rule(
        f"{prefix}/transactions",
        endpoint="transactions_list",
        view_func=list_transactions,
        methods=["GET"],
    )


def create_app(
    service: Optional[TransactionService] = None,
    config: Optional[Config] = None,
) -> Flask:
    """Build the web application with its routes, CORS handling and rate limit."""
    cfg = config if config is not None else get_config()
    if service is None:
        service = TransactionService(InMemoryTransactionRepository())

    app = Flask("coreledger")
    app.config["LEDGER_CONFIG"] = cfg

    @app.before_request
    def _preflight() -> Optional[Response]:
        if request.method == "OPTIONS":
            return Response(status=204)
        return None

    @app.after_request
    def _cors(response: Response) -> Response:
        response.headers.update(_CORS_HEADERS)
        return response

    @app.get("/")
    def index() -> Response:
        return jsonify({"data": {"status": "success", "message": "Core Ledger API is running"}})

    @app.get("/health")
    def health() -> Response:
        return jsonify({"data": {"status": "success", "message": "Wealify API is running"}})

    register_constant_routes(app)
    register_transaction_routes(app, service, API_PREFIX)

    app.wsgi_app = RateLimitMiddleware(app.wsgi_app)  # type: ignore[method-assign]
    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the HTTP server and run until it stops."""
    parser = argparse.ArgumentParser(prog="coreledger", description="Run the ledger HTTP API.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", help="port to listen on (default: PORT or 8080)")
    args = parser.parse_args(argv)

    config = get_config()
    port_text = args.port or config.common.port or DEFAULT_PORT
    try:
        port = int(port_text)
    except ValueError:
        parser.error(f"invalid port: {port_text!r}")

    application = Application()
    app = create_app(config=config)
    application.run()
    _log.info("Server starting on port %s", port)
    try:
        app.run(host=args.host, port=port)
    finally:
        _log.info("Server shutting down")
        application.shutdown()
    return 0