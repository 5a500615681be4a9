# coreledger

Building blocks for a ledger backend, with a small Flask HTTP API on top.

## Modules

- **`coreledger.fees`**: `calculate_fee(fee_type, fee_value, amount)` returns
  `fee_value * amount` for `"PERCENT"` and `fee_value` for `"FIXED"` or any
  other type. `calculate_top_up_fee(tier, platform)` picks the top-up fee for a
  `Tier` (`STANDARD`, `SILVER`, `GOLD`, `DIAMOND`) from a `TopUpFees`. It raises
  `InvalidPlatformError` when the platform is `None` or lacks a fee for any
  tier, and `ValueError("invalid input")` for an unknown tier.
- **`coreledger.statistics`**: `calculate_stats_balance_result` folds
  `StatsTransactionInfo` rows into a `StatsBalanceResult`:
  - approved top-ups add to the amount before fee, the received amount and the fee;
  - pending top-ups add to the pending top-ups;
  - every withdrawal row adds to `total_withdrawal`, with pending and approved
    rows also counted separately;
  - `ADJUSTMENT` rows add to the amount before fee and the received amount;
  - `display_balance` is `total_received - total_withdrawal`.

  `group_by_customer` groups rows by `customer_id` and keeps their order.
  `summarize_virtual_accounts` turns `VAStatusCount` rows into per-customer
  `StatsVirtualAccountInfo` counts.
- **`coreledger.errors`**: `AppErrorCode`, the `AppError` exception
  (`str()` is its description, `to_dict()` its JSON form) and
  `new_error(code, custom_description=None)`. `new_error` fills in the scope,
  message and description from the code tables. A non-empty custom description
  replaces the default one, and an unknown code raises `ValueError`.
- **`coreledger.security`**:
  - `generate_api_key()` returns 16 random bytes as hex.
  - `hash_api_key` computes the HMAC-SHA256 of a key. The HMAC key defaults to
    the configured `API_SECRET_KEY`.
  - `verify_api_key` checks a key against a stored hash in constant time.
  - `generate_otp(length)` returns a string of random digits.
  - `generate_ed25519_hex`, `sign_ed25519` and `verify_ed25519_hex` work with
    hex-encoded Ed25519 keys and signatures. The private key is 64 bytes: the
    seed followed by the public key.
- **`coreledger.constants`**: status, type, provider and format constants.
  `CONSTANTS` is the catalogue the API serves, with `ConstantInfo` and
  `ProviderInfo` entries. `constants_payload()` returns its JSON form and
  `constant_group(name)` one group of it; an unknown group raises `KeyError`.
- **`coreledger.config`**: `Config` and its sections, read from environment
  variables (see below).
- **`coreledger.ratelimit`**:
  - `RateLimiter` is a per-client token bucket. By default it refills 60 tokens
    per second, holds a burst of 5 and forgets a bucket after 60 seconds unused.
  - `RateLimitMiddleware` is WSGI middleware that answers over-limit requests
    with status 429 and a JSON error body.
- **`coreledger.web`**: `create_app`, `Application`, `TransactionService`,
  `InMemoryTransactionRepository`, `wrap_response` and the `main` entry point.

## Examples

```python
from coreledger.fees import Tier, TopUpFees, calculate_fee, calculate_top_up_fee

calculate_fee("PERCENT", 0.02, 1000.0)   # 20.0
calculate_fee("FIXED", 5.0, 1000.0)      # 5.0

fees = TopUpFees(diamond=0.005, gold=0.01, silver=0.015, standard=0.02)
calculate_top_up_fee(Tier.GOLD, fees)    # 0.01
```

```python
from coreledger.errors import AppErrorCode, new_error

err = new_error(AppErrorCode.VA_LIMIT_EXCEED)
err.to_dict()   # {"code": "0200201001", "scope": "VA.VA.CREATE.LIMIT_EXCEEDED", ...}
```

```python
from coreledger.security import (
    generate_api_key, hash_api_key, verify_api_key,
    generate_ed25519_hex, sign_ed25519, verify_ed25519_hex,
)

key = generate_api_key()                     # 32 hex characters
stored = hash_api_key(key, "secret")
verify_api_key(key, stored, "secret")        # True

private_hex, public_hex = generate_ed25519_hex()
signature_hex = sign_ed25519(private_hex, b"payload")
verify_ed25519_hex(public_hex, b"payload", signature_hex)   # True
```

Malformed hex, or a key or signature of the wrong length, raises `ValueError`.
A well-formed signature that does not match gives `False`.

## Running the API

```
coreledger [--host HOST] [--port PORT]
```

The server listens on `--host` (default `0.0.0.0`) and `--port`. Without
`--port` it uses the `PORT` setting, or 8080 when that is not set. It answers:

- `GET /` and `GET /health`: a status message under `data`.
- `GET /api/v2/transactions`: the transaction list under `data`.
- `GET /api/v2/constants` and `GET /api/v2/cms/constants`: the whole constants
  catalogue. Each has `account-levels`, `account-types`, `providers` and
  `providers-types` beneath it for single groups.

Every response carries permissive CORS headers, and `OPTIONS` requests get an
empty 204. Clients are rate limited per address through `RateLimitMiddleware`.

To embed the API, build it with `create_app(service, config)`. Pass a
`TransactionService`, for example one over an `InMemoryTransactionRepository`,
and a `Config` from `load_config`. `wrap_response(body, status, config)` puts a
JSON body into the standard envelope. The envelope holds the status code, the
body as `data` (or a string body as the error message), and the service's
name, mode, version and current UTC time. The routes do not apply the envelope
themselves.

## Configuration

Settings come from environment variables. When the process environment is
used, a `.env` file in the working directory is loaded first; variables that
are already set win.

| Variable | Meaning |
| --- | --- |
| `API_SECRET_KEY` | key used to hash API keys |
| `BASE_URL`, `NAME`, `MODE`, `PORT` | service identity and listening port |
| `LOG`, `LOG_TYPES` | logging switches |
| `VERSION_CODE`, `VERSION_NAME`, `VERSION_PATH` | version reported in wrapped responses |
| `POSTGES_HOST`, `POSTGES_PORT`, `POSTGES_USER`, `POSTGES_PASSWORD`, `POSTGES_DB` | database connection settings |
| `REDIS_URL`, `REDIS_SKIP_TLS` | Redis connection settings |
| `JWT_SECRET`, `JWT_EXPIRES_IN` | token signing settings |

Unset or empty variables keep their zero values. A boolean or integer that
cannot be parsed raises `ValueError`.

- `Config.from_env(environ)` reads a given mapping.
- `load_config()` reads the process environment.
- `get_config()` returns the configuration loaded once per process.
- `reader()` returns an `EnvReader` with `get`, `get_bool`, `get_int` and
  `get_duration` for any single variable. Keys are upper-cased. Values that
  cannot be converted give zero values, and a duration without a unit is read
  as nanoseconds.

## What it does not do

- **No persistence.** Transactions live only in an
  `InMemoryTransactionRepository`. The database and Redis settings are read
  but nothing connects to them.
- **No database queries.** The statistics functions work on rows you supply;
  they do not run queries.
- **Limited API.** There is no authentication, no idempotency handling, and no
  transaction endpoints beyond listing.