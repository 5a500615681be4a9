"""Application error codes and the error type that carries them.

Codes are laid out as module + service + category + sequence, where the
category is 01 for validation, 02 for business rules and 03 for third parties.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union


class AppErrorCode(str, Enum):
    """Known application error codes."""

    UNKNOWN = "-1"

    WEALIFY_WALLET_FEATURE_INACTIVE = "0100102403"

    VA_LIMIT_EXCEED = "0200201001"
    VA_CARD_HOLDER = "0200201002"
    VA_FEATURE_INACTIVE = "0200102403"
    VA_PAYOUT_PROVIDER_NOT_ENOUGH_BALANCE = "0200402001"
    VA_PAYOUT_PROVIDER_CALL_THIRD_PARTY_FAILED = "0200403001"
    VA_PAYOUT_CANNOT_SPLIT_TRANSACTION = "0200403001"


CODE_TO_SCOPE: dict[AppErrorCode, str] = {
    AppErrorCode.VA_LIMIT_EXCEED: "VA.VA.CREATE.LIMIT_EXCEEDED",
    AppErrorCode.VA_CARD_HOLDER: "VA.CREATE.VALIDATE.CARD_HOLDER",
    AppErrorCode.VA_PAYOUT_PROVIDER_NOT_ENOUGH_BALANCE: "VA.TRANSACTION.WITHDRAW.NOT_ENOUGH_BALANCE",
    AppErrorCode.VA_PAYOUT_PROVIDER_CALL_THIRD_PARTY_FAILED: "VA.TRANSACTION.UNKNOWN_ERROR",
}

CODE_TO_MESSAGE: dict[AppErrorCode, str] = {
    AppErrorCode.UNKNOWN: "Có gì đó bất thường, vui lòng kiểm tra lại",
    AppErrorCode.WEALIFY_WALLET_FEATURE_INACTIVE: "Bạn chưa được active tính năng Wealify Wallet",
    AppErrorCode.VA_LIMIT_EXCEED: "Số lượng VA đã đạt giới hạn",
    AppErrorCode.VA_CARD_HOLDER: "Tên VA không hợp lệ",
    AppErrorCode.VA_FEATURE_INACTIVE: "Bạn chưa được active tính năng VA",
    AppErrorCode.VA_PAYOUT_PROVIDER_NOT_ENOUGH_BALANCE: "Số dư không đủ",
    AppErrorCode.VA_PAYOUT_PROVIDER_CALL_THIRD_PARTY_FAILED: "Có gì đó không đúng",
}

CODE_TO_DESCRIPTION: dict[AppErrorCode, str] = {
    AppErrorCode.VA_LIMIT_EXCEED: "Số lượng VA đã đạt giới hạn",
    AppErrorCode.VA_CARD_HOLDER: "Tên VA không hợp lệ",
    AppErrorCode.VA_PAYOUT_PROVIDER_NOT_ENOUGH_BALANCE: "Số dư không đủ",
    AppErrorCode.VA_PAYOUT_PROVIDER_CALL_THIRD_PARTY_FAILED: "Có gì đó không đúng",
}


class AppError(Exception):
    """An application error with a code, scope, message and description."""

    def __init__(
        self,
        code: AppErrorCode,
        message: str = "",
        description: str = "",
        scope: str = "",
    ) -> None:
        super().__init__(description)
        self.code = code
        self.scope = scope
        self.message = message
        self.description = description

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return (
            f"AppError(code={self.code.value!r}, scope={self.scope!r}, "
            f"message={self.message!r}, description={self.description!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; scope and description are left out when empty."""
        data: dict[str, Any] = {"code": self.code.value}
        if self.scope:
            data["scope"] = self.scope
        data["message"] = self.message
        if self.description:
            data["description"] = self.description
        return data


def new_error(
    code: Union[AppErrorCode, str],
    custom_description: Optional[str] = None,
) -> AppError:
    """Build an AppError from the tables for ``code``.

    A non-empty ``custom_description`` replaces the default description.
    Raises ValueError for a code that is not known.
    """
    code = AppErrorCode(code)
    description = CODE_TO_DESCRIPTION.get(code, "")
    if custom_description:
        description = custom_description
    return AppError(
        code=code,
        scope=CODE_TO_SCOPE.get(code, ""),
        message=CODE_TO_MESSAGE.get(code, ""),
        description=description,
    )