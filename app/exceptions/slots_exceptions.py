from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    ALL_FIELDS_REQUIRED = "ALL_FIELDS_REQUIRED"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    INVALID_DATE = "INVALID_DATE"
    PAST_DATE = "PAST_DATE"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_TIME_RANGE = "INVALID_TIME_RANGE"
    INVALID_INTERVAL = "INVALID_INTERVAL"
    INTERVAL_TOO_LARGE = "INTERVAL_TOO_LARGE"
    NO_SLOTS = "NO_SLOTS"
    ALL_DUPLICATE = "ALL_DUPLICATE"
    DUPLICATE = "DUPLICATE"
    SLOT_ALREADY_BOOKED = "SLOT_ALREADY_BOOKED"
    SLOT_NOT_FOUND = "SLOT_NOT_FOUND"
    SLOT_IS_BOOKED = "SLOT_IS_BOOKED"
    TOO_LATE_TO_BOOK = "TOO_LATE_TO_BOOK"
    CANCEL_NOT_ALLOWED = "CANCEL_NOT_ALLOWED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    SERVER_ERROR = "SERVER_ERROR"


class PolicyRule(str, Enum):
    PAST_SLOT = "PAST_SLOT"
    CANCEL_WINDOW_CLOSED = "CANCEL_WINDOW_CLOSED"
    BOOKING_WINDOW_CLOSED = "BOOKING_WINDOW_CLOSED"


class ErrorInfo(NamedTuple):
    status_code: int
    message: str


ERROR_TABLE: Mapping[ErrorCode, ErrorInfo] = MappingProxyType(
    {
        ErrorCode.INVALID_INPUT: ErrorInfo(400, "Invalid input"),
        ErrorCode.ALL_FIELDS_REQUIRED: ErrorInfo(400, "All fields are required"),
        ErrorCode.INVALID_DATE_FORMAT: ErrorInfo(400, "Date must be in YYYY-MM-DD format"),
        ErrorCode.INVALID_DATE: ErrorInfo(400, "Date is not a valid calendar date"),
        ErrorCode.PAST_DATE: ErrorInfo(400, "Date cannot be in the past"),
        ErrorCode.INVALID_TIME_FORMAT: ErrorInfo(400, "Times must be in HH:mm 24-hour format"),
        ErrorCode.INVALID_TIME_RANGE: ErrorInfo(400, "Start time must be earlier than end time"),
        ErrorCode.INVALID_INTERVAL: ErrorInfo(400, "Interval must be a positive number of minutes"),
        ErrorCode.INTERVAL_TOO_LARGE: ErrorInfo(400, "Interval cannot exceed 120 minutes"),
        ErrorCode.NO_SLOTS: ErrorInfo(400, "No valid slots generated"),
        ErrorCode.ALL_DUPLICATE: ErrorInfo(409, "All slots already exist for this time range"),
        ErrorCode.DUPLICATE: ErrorInfo(409, "Slots were created concurrently by another request"),
        ErrorCode.SLOT_ALREADY_BOOKED: ErrorInfo(409, "This slot is no longer available"),
        ErrorCode.SLOT_NOT_FOUND: ErrorInfo(404, "Slot not found"),
        ErrorCode.SLOT_IS_BOOKED: ErrorInfo(409, "Booked slots cannot be deleted"),
        ErrorCode.TOO_LATE_TO_BOOK: ErrorInfo(403, "Slots must be booked at least 30 minutes in advance"),
        ErrorCode.CANCEL_NOT_ALLOWED: ErrorInfo(403, "This booking cannot be cancelled"),
        ErrorCode.UNAUTHORIZED: ErrorInfo(401, "Authentication required"),
        ErrorCode.FORBIDDEN: ErrorInfo(403, "Admin access required"),
        ErrorCode.SERVER_ERROR: ErrorInfo(500, "Unexpected storage failure"),
    }
)


class SlotsError(Exception):
    def __init__(self, code: ErrorCode, rule: PolicyRule | None = None, details: dict | None = None):
        self.code = code
        self.rule = rule
        self.details = details
        super().__init__(ERROR_TABLE[code].message)

    @property
    def status_code(self) -> int:
        return ERROR_TABLE[self.code].status_code

    @property
    def message(self) -> str:
        return ERROR_TABLE[self.code].message


class InputError(SlotsError):
    pass


class ConflictError(SlotsError):
    pass


class NotFoundError(SlotsError):
    def __init__(self):
        super().__init__(ErrorCode.SLOT_NOT_FOUND)


class PolicyError(SlotsError):
    pass


class StoreError(SlotsError):
    def __init__(self):
        super().__init__(ErrorCode.SERVER_ERROR)


class AuthorizationError(SlotsError):
    pass
