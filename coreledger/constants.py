"""System constants and the catalogue served by the constants endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

# Payment status
PAYMENT_STATUS_PENDING = "PENDING"
PAYMENT_STATUS_PROCESS = "PROCESS"
PAYMENT_STATUS_APPROVED = "APPROVED"
PAYMENT_STATUS_REJECTED = "REJECTED"

# Setting keys
SETTING_KEY_VA_LIMIT = "VA_LIMIT"
SETTING_KEY_VA_FEE = "VA_FEE"
SETTING_KEY_LARK_CHAT_ID = "LARK_CHAT_ID"
SETTING_KEY_INACTIVE_VA_RESTRICTED_HOUR = "INACTIVE_VA_RESTRICTED_HOUR"
SETTING_KEY_YOOBIL_AUTO_WITHDRAW = "YOOBIL_AUTO_WITHDRAW"
SETTING_KEY_YOOBIL_MAP_BANK = "YOOBIL_MAP_BANK"
SETTING_KEY_NEOX_AUTO_WITHDRAW = "NEOX_AUTO_WITHDRAW"
SETTING_KEY_NEOX_MAP_BANK = "NEOX_MAP_BANK"
SETTING_KEY_VC_FEE = "VC_FEE"

# Order
ORDER_DESC = "DESC"
ORDER_ASC = "ASC"

# Verification status
VERIFICATION_STATUS_UNVERIFIED = "UNVERIFIED"
VERIFICATION_STATUS_VERIFIED = "VERIFIED"

# Two factor method
TWO_FACTOR_METHOD_EMAIL = "EMAIL"
TWO_FACTOR_METHOD_AUTHENTICATOR_APP = "AUTHENTICATOR_APP"
TWO_FACTOR_METHOD_SMS = "SMS"

# Two factor status
TWO_FACTOR_STATUS_ENABLE = "ENABLE"
TWO_FACTOR_STATUS_DISABLE = "DISABLE"

# Notification group
NOTIFICATION_GROUP_SYSTEM = "SYSTEM"
NOTIFICATION_GROUP_IMPORTANT = "IMPORTANT"

# Notification types
NOTIFICATION_TYPE_WELCOME = "WELCOME"
NOTIFICATION_TYPE_NEW_DEVICE_LOGIN = "NEW_DEVICE_LOGIN"
NOTIFICATION_TYPE_UPDATE_ACCOUNT_LEVEL = "UPDATE_ACCOUNT_LEVEL"
NOTIFICATION_TYPE_UPDATE_ACCOUNT_TYPE = "UPDATE_ACCOUNT_TYPE"
NOTIFICATION_TYPE_UPGRADE_TIER = "UPGRADE_TIER"
NOTIFICATION_TYPE_DOWNGRADE_TIER = "DOWNGRADE_TIER"
NOTIFICATION_TYPE_ENABLE_WEALIFY_WALLET_FEATURE = "ENABLE_WEALIFY_WALLET_FEATURE"
NOTIFICATION_TYPE_DISABLE_WEALIFY_WALLET_FEATURE = "DISABLE_WEALIFY_WALLET_FEATURE"
NOTIFICATION_TYPE_ADJUST_BALANCE = "ADJUST_BALANCE"
NOTIFICATION_TYPE_REJECT_KYC = "REJECT_KYC"
NOTIFICATION_TYPE_APPROVE_KYC = "APPROVE_KYC"
NOTIFICATION_TYPE_REJECT_KYB = "REJECT_KYB"
NOTIFICATION_TYPE_APPROVE_KYB = "APPROVE_KYB"
NOTIFICATION_TYPE_APPROVE_PAYMENT = "APPROVE_PAYMENT"
NOTIFICATION_TYPE_REJECT_PAYMENT = "REJECT_PAYMENT"
NOTIFICATION_TYPE_CREATE_VIRTUAL_ACCOUNT = "CREATE_VIRTUAL_ACCOUNT"
NOTIFICATION_TYPE_APPROVE_WITHDRAW = "APPROVE_WITHDRAW"
NOTIFICATION_TYPE_REJECT_WITHDRAW = "REJECT_WITHDRAW"
NOTIFICATION_TYPE_APPROVE_TOP_UP = "APPROVE_TOP_UP"

# File driver
FILE_DRIVER_LARK = "LARK"
FILE_DRIVER_GOOGLE = "GOOGLE"
FILE_DRIVER_AWS = "AWS"

# Session type
SESSION_TYPE_CUSTOMER = "CUSTOMER"
SESSION_TYPE_EMPLOYEE = "EMPLOYEE"

# Payment type
PAYMENT_TYPE_BANK = "BANK"
PAYMENT_TYPE_E_WALLET = "E_WALLET"

# KY verification status
KY_VERIFICATION_STATUS_PENDING = "PENDING"
KY_VERIFICATION_STATUS_APPROVED = "APPROVED"
KY_VERIFICATION_STATUS_REJECTED = "REJECTED"

# KY request status
KY_REQUEST_STATUS_PENDING = "PENDING"
KY_REQUEST_STATUS_COMPLETED = "COMPLETED"

# Identification type
IDENTIFICATION_TYPE_PASSPORT = "PASSPORT"
IDENTIFICATION_TYPE_IDENTITY_CARD = "IDENTITY_CARD"
IDENTIFICATION_TYPE_DRIVER_LICENSE = "DRIVER_LICENSE"

# Document type
DOCUMENT_TYPE_BANK_STATEMENT = "BANK_STATEMENT"
DOCUMENT_TYPE_INTERNET_SERVICE_BILLS = "INTERNET_SERVICE_BILLS"
DOCUMENT_TYPE_CREDIT_NOTE = "CREDIT_NOTE"
DOCUMENT_TYPE_TAX_STATEMENT = "TAX_STATEMENT"
DOCUMENT_TYPE_BANK_REFERENCE_LETTER = "BANK_REFERENCE_LETTER"

# Request type
REQUEST_TYPE_TOP_UP = "TOP_UP"
REQUEST_TYPE_WITHDRAWAL = "WITHDRAWAL"
REQUEST_TYPE_PROFILE = "PROFILE"
REQUEST_TYPE_PAYMENT = "PAYMENT"
REQUEST_TYPE_KYC_LEVEL_1 = "KYC_LEVEL_1"
REQUEST_TYPE_KYC_LEVEL_2 = "KYC_LEVEL_2"
REQUEST_TYPE_KYC_LEVEL_3 = "KYC_LEVEL_3"
REQUEST_TYPE_KYB_LEVEL_1 = "KYB_LEVEL_1"
REQUEST_TYPE_KYB_LEVEL_2 = "KYB_LEVEL_2"
REQUEST_TYPE_KYB_LEVEL_3 = "KYB_LEVEL_3"

# Field type
FIELD_TYPE_MEDIA = "MEDIA"
FIELD_TYPE_DOCUMENT = "DOCUMENT"
FIELD_TYPE_COUNTRY = "COUNTRY"
FIELD_TYPE_PHONE_NUMBER = "PHONE_NUMBER"
FIELD_TYPE_CALLING_CODE = "CALLING_CODE"
FIELD_TYPE_EMAIL = "EMAIL"
FIELD_TYPE_TEXT = "TEXT"
FIELD_TYPE_NUMBER = "NUMBER"
FIELD_TYPE_NUMERIC = "NUMERIC"
FIELD_TYPE_DATE = "DATE"
FIELD_TYPE_BOOLEAN = "BOOLEAN"

# Request status
REQUEST_STATUS_PENDING = "PENDING"
REQUEST_STATUS_CANCELLED = "CANCELLED"
REQUEST_STATUS_RESPONDED = "RESPONDED"

# Wallet type
WALLET_TYPE_MAIN = "MAIN"
WALLET_TYPE_VA = "VA"
WALLET_TYPE_VC = "VC"

# Wallet currency
WALLET_CURRENCY_VNDW = "VNDW"
WALLET_CURRENCY_VNDY = "VNDY"
WALLET_CURRENCY_USD = "USD"

# Transaction type
TRANSACTION_TYPE_TOP_UP = "TOP_UP"
TRANSACTION_TYPE_WITHDRAWAL = "WITHDRAWAL"
TRANSACTION_TYPE_INTERNAL = "INTERNAL"

# Transaction VC type
TRANSACTION_VC_TYPE_TOP_UP = "TOP_UP"
TRANSACTION_VC_TYPE_WITHDRAWAL = "WITHDRAWAL"
TRANSACTION_VC_TYPE_PAYMENT = "PAYMENT"

# VC detail transaction type
VC_DETAIL_TRANSACTION_TYPE_CARD_TOP_UP = "CARD_TOP_UP"
VC_DETAIL_TRANSACTION_TYPE_CARD_ISSUE_TOP_UP = "CARD_ISSUE_TOP_UP"
VC_DETAIL_TRANSACTION_TYPE_CARD_WITHDRAW = "CARD_WITHDRAW"
VC_DETAIL_TRANSACTION_TYPE_CARD_PAYMENT = "CARD_PAYMENT"
VC_DETAIL_TRANSACTION_TYPE_WALLET_TOP_UP = "WALLET_TOP_UP"
VC_DETAIL_TRANSACTION_TYPE_WALLET_WITHDRAW = "WALLET_WITHDRAW"
VC_DETAIL_TRANSACTION_TYPE_WALLET_ISSUE_WITHDRAW = "WALLET_ISSUE_WITHDRAW"
VC_DETAIL_TRANSACTION_TYPE_WALLET_REFUND = "WALLET_REFUND"

# Platform status
PLATFORM_STATUS_ACTIVE = "ACTIVE"
PLATFORM_STATUS_INACTIVE = "INACTIVE"

# Platform type
PLATFORM_TYPE_DEFAULT = "DEFAULT"
PLATFORM_TYPE_CUSTOM = "CUSTOM"

# Tier
TIER_STANDARD = "STANDARD"
TIER_SILVER = "SILVER"
TIER_GOLD = "GOLD"
TIER_DIAMOND = "DIAMOND"

# Transaction status
TRANSACTION_STATUS_PENDING = "PENDING"
TRANSACTION_STATUS_PROCESS = "PROCESS"
TRANSACTION_STATUS_APPROVED = "APPROVED"
TRANSACTION_STATUS_REJECTED = "REJECTED"
TRANSACTION_STATUS_WAITING = "WAITING"
TRANSACTION_STATUS_CANCELLED = "CANCELLED"

# Transaction VC status
TRANSACTION_VC_STATUS_PROCESSING = "PROCESSING"
TRANSACTION_VC_STATUS_SUCCESS = "SUCCESS"
TRANSACTION_VC_STATUS_FAILURE = "FAILURE"

# VA bank
VA_BANK_BIDV = "BIDV"
VA_BANK_KLB = "KLB"
VA_BANK_MSB = "MSB"
VA_BANK_TCB = "TCB"

# Third party status
THIRD_PARTY_STATUS_CORRECT = "CORRECT"
THIRD_PARTY_STATUS_INCORRECT = "INCORRECT"

# Transaction history type
TRANSACTION_HISTORY_TYPE_CREATED = "CREATED"
TRANSACTION_HISTORY_TYPE_UPDATED = "UPDATED"
TRANSACTION_HISTORY_TYPE_REVIEWED = "REVIEWED"
TRANSACTION_HISTORY_TYPE_RESOLVED = "RESOLVED"
TRANSACTION_HISTORY_TYPE_CHANGE_STATUS = "CHANGE_STATUS"

# Rate value type
RATE_VALUE_TYPE_MANUAL = "MANUAL"
RATE_VALUE_TYPE_LINKED = "LINKED"

# Fee value type
FEE_VALUE_TYPE_PERCENT = "PERCENT"
FEE_VALUE_TYPE_FIXED = "FIXED"

# Account level
ACCOUNT_LEVEL_1 = 1
ACCOUNT_LEVEL_2 = 2
ACCOUNT_LEVEL_3 = 3
ACCOUNT_LEVEL_VIP = 4

# Account type
ACCOUNT_TYPE_BUSINESS = "BUSINESS"
ACCOUNT_TYPE_INDIVIDUAL = "INDIVIDUAL"

# Customer type
CUSTOMER_TYPE_NORMAL = "NORMAL"
CUSTOMER_TYPE_SALE = "SALE"

# Provider
PROVIDER_BANK = "BANK"
PROVIDER_WEALIFY = "WEALIFY"
PROVIDER_PING_PONG = "PING_PONG"
PROVIDER_LIAN_LIAN = "LIAN_LIAN"
PROVIDER_PAYONEER = "PAYONEER"
PROVIDER_WORLD_FIRST = "WORLD_FIRST"
PROVIDER_TAZAPAY = "TAZAPAY"
PROVIDER_MERCURY = "MERCURY"
PROVIDER_YOOBIL = "YOOBIL"
PROVIDER_NEOX = "NEOX"
PROVIDER_G_TEL = "G_TEL"

# Provider group
PROVIDER_GROUP_BANK = "BANK"
PROVIDER_GROUP_E_WALLET = "E_WALLET"
PROVIDER_GROUP_WEALIFY = "WEALIFY"
PROVIDER_GROUP_VA = "VA"

# Provider type
PROVIDER_TYPE_BUSINESS = "BUSINESS"
PROVIDER_TYPE_INDIVIDUAL = "INDIVIDUAL"

# Socket events
SOCKET_EVENT_NOTIFICATIONS = "notifications"
SOCKET_EVENT_NEW_NOTIFICATION = "notifications/new"
SOCKET_EVENT_CMS_NOTIFICATIONS = "cms/notifications"
SOCKET_EVENT_CMS_NEW_NOTIFICATIONS = "cms/notifications/new"
SOCKET_EVENT_MAIN_WALLETS = "main-wallets"
SOCKET_EVENT_CAMPAIGN_REFERRAL_ALL_TIME_UPDATE = "campaign/referral/all-time:update"
SOCKET_EVENT_CAMPAIGN_REFERRAL_CURRENT_UPDATE = "campaign/referral/current:update"
SOCKET_EVENT_CAMPAIGN_TRANSACTION_ALL_TIME_UPDATE = "campaign/transactions/all-time:update"
SOCKET_EVENT_CAMPAIGN_TRANSACTION_CURRENT_UPDATE = "campaign/transactions/current:update"

# VA status
VA_STATUS_ACTIVE = "ACTIVE"
VA_STATUS_INACTIVE = "INACTIVE"
VA_STATUS_RESTRICTED = "RESTRICTED"
VA_STATUS_PENDING = "PENDING"
VA_STATUS_PROCESS = "PROCESS"
VA_STATUS_REJECTED = "REJECTED"

# Boolean strings
BOOLEAN_STRING_TRUE = "true"
BOOLEAN_STRING_FALSE = "false"

# Date/time formats (strftime patterns)
DATE_TIME_FORMAT_HHMMDDMMYYYY = "%H:%M %d/%m/%Y"
DATE_TIME_FORMAT_DDMMYYYY = "%d/%m/%Y"
DATE_TIME_FORMAT_DDMMYYYY_DASH = "%d-%m-%Y"
DATE_TIME_FORMAT_DDMMYYYYHHMMA = "%d/%m/%Y %I:%M %p"

# System constants
SYSTEM_UNIT = "VNDW"
USD_CODE = "USD"
VND_CODE = "VND"
VN_ISO_CODE2 = "VN"
FORMAT_DATE = "%Y-%m-%d %H:%M:%S"
MAXIMUM_NUMBER = 999999999999999
REFERRAL_CODE_LENGTH = 10


@dataclass(frozen=True)
class ConstantInfo:
    """A named constant value, optionally with an icon."""

    name: str
    value: Any
    icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; the icon is left out when empty."""
        data: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.icon:
            data["icon"] = self.icon
        return data


@dataclass(frozen=True)
class ProviderInfo:
    """A payment provider and the transaction types it supports."""

    name: str
    value: str
    group: str
    transaction_types: tuple[str, ...] = field(default_factory=tuple)
    icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; the icon is left out when empty."""
        data: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.icon:
            data["icon"] = self.icon
        data["group"] = self.group
        data["transaction_types"] = list(self.transaction_types)
        return data


_Entry = Union[ConstantInfo, ProviderInfo]

_TOP_UP_WITHDRAWAL = (TRANSACTION_TYPE_TOP_UP, TRANSACTION_TYPE_WITHDRAWAL)


def _provider(name: str, value: str, group: str, types=_TOP_UP_WITHDRAWAL) -> ProviderInfo:
    return ProviderInfo(name=name, value=value, group=group, transaction_types=tuple(types))


def _constant(name: str, value: Any) -> ConstantInfo:
    return ConstantInfo(name=name, value=value)


CONSTANTS: Mapping[str, Mapping[str, _Entry]] = MappingProxyType({
    "payment_status": MappingProxyType({
        PAYMENT_STATUS_PENDING: _constant("Pending", PAYMENT_STATUS_PENDING),
        PAYMENT_STATUS_PROCESS: _constant("Process", PAYMENT_STATUS_PROCESS),
        PAYMENT_STATUS_APPROVED: _constant("Approved", PAYMENT_STATUS_APPROVED),
        PAYMENT_STATUS_REJECTED: _constant("Rejected", PAYMENT_STATUS_REJECTED),
    }),
    "order": MappingProxyType({
        ORDER_ASC: _constant("Earliest", ORDER_ASC),
        ORDER_DESC: _constant("Oldest", ORDER_DESC),
    }),
    "verification_status": MappingProxyType({
        VERIFICATION_STATUS_UNVERIFIED: _constant("Unverified", VERIFICATION_STATUS_UNVERIFIED),
        VERIFICATION_STATUS_VERIFIED: _constant("Verified", VERIFICATION_STATUS_VERIFIED),
    }),
    "two_factor_method": MappingProxyType({
        TWO_FACTOR_METHOD_EMAIL: _constant("Email", TWO_FACTOR_METHOD_EMAIL),
        TWO_FACTOR_METHOD_AUTHENTICATOR_APP: _constant(
            "Authenticator app", TWO_FACTOR_METHOD_AUTHENTICATOR_APP
        ),
        TWO_FACTOR_METHOD_SMS: _constant("SMS", TWO_FACTOR_METHOD_SMS),
    }),
    "two_factor_status": MappingProxyType({
        TWO_FACTOR_STATUS_ENABLE: _constant("Enable", TWO_FACTOR_STATUS_ENABLE),
        TWO_FACTOR_STATUS_DISABLE: _constant("Disable", TWO_FACTOR_STATUS_DISABLE),
    }),
    "notification_group": MappingProxyType({
        NOTIFICATION_GROUP_IMPORTANT: _constant("Important", NOTIFICATION_GROUP_IMPORTANT),
        NOTIFICATION_GROUP_SYSTEM: _constant("System", NOTIFICATION_GROUP_SYSTEM),
    }),
    "account_level": MappingProxyType({
        "1": _constant("Level 1", ACCOUNT_LEVEL_1),
        "2": _constant("Level 2", ACCOUNT_LEVEL_2),
        "3": _constant("Level 3", ACCOUNT_LEVEL_3),
        "4": _constant("VIP", ACCOUNT_LEVEL_VIP),
    }),
    "account_type": MappingProxyType({
        ACCOUNT_TYPE_BUSINESS: _constant("Business", ACCOUNT_TYPE_BUSINESS),
        ACCOUNT_TYPE_INDIVIDUAL: _constant("Individual", ACCOUNT_TYPE_INDIVIDUAL),
    }),
    "provider": MappingProxyType({
        PROVIDER_BANK: _provider("Bank", PROVIDER_BANK, PROVIDER_GROUP_BANK),
        PROVIDER_WEALIFY: _provider(
            "Wealify",
            PROVIDER_WEALIFY,
            PROVIDER_GROUP_WEALIFY,
            (TRANSACTION_TYPE_TOP_UP, TRANSACTION_TYPE_WITHDRAWAL, TRANSACTION_TYPE_INTERNAL),
        ),
        PROVIDER_PING_PONG: _provider("Ping Pong", PROVIDER_PING_PONG, PROVIDER_GROUP_E_WALLET),
        PROVIDER_LIAN_LIAN: _provider("Lian Lian", PROVIDER_LIAN_LIAN, PROVIDER_GROUP_E_WALLET),
        PROVIDER_PAYONEER: _provider("Payoneer", PROVIDER_PAYONEER, PROVIDER_GROUP_E_WALLET),
        PROVIDER_WORLD_FIRST: _provider("World First", PROVIDER_WORLD_FIRST, PROVIDER_GROUP_E_WALLET),
        PROVIDER_TAZAPAY: _provider("Tazapay", PROVIDER_TAZAPAY, PROVIDER_GROUP_E_WALLET),
        PROVIDER_MERCURY: _provider("Mercury", PROVIDER_MERCURY, PROVIDER_GROUP_E_WALLET),
        PROVIDER_YOOBIL: _provider("Yoobil", PROVIDER_YOOBIL, PROVIDER_GROUP_VA),
        PROVIDER_NEOX: _provider("Neox", PROVIDER_NEOX, PROVIDER_GROUP_VA),
        PROVIDER_G_TEL: _provider("G Tel", PROVIDER_G_TEL, PROVIDER_GROUP_E_WALLET),
    }),
    "provider_type": MappingProxyType({
        PROVIDER_TYPE_BUSINESS: _constant("Business", PROVIDER_TYPE_BUSINESS),
        PROVIDER_TYPE_INDIVIDUAL: _constant("Individual", PROVIDER_TYPE_INDIVIDUAL),
    }),
})


def constant_group(name: str) -> dict[str, dict[str, Any]]:
    """Return the JSON form of one constant group.

    Raises KeyError when no group has that name.
    """
    try:
        entries = CONSTANTS[name]
    except KeyError:
        raise KeyError(f"unknown constant group: {name!r}") from None
    return {key: entry.to_dict() for key, entry in entries.items()}


def constants_payload() -> dict[str, dict[str, dict[str, Any]]]:
    """Return the JSON form of every constant group."""
    return {name: constant_group(name) for name in CONSTANTS}