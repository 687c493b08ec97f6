"""Pydantic models for handles, results, envelopes and operation metadata."""

from xlbridge.contracts.common import (
    ArgumentError,
    BridgeError,
    ContractViolation,
    ErrorDetail,
    Metrics,
    OperationFailed,
    ResponseEnvelope,
    Target,
    WarningDetail,
    unwrap_value,
)
from xlbridge.contracts.handles import Handle, HandleKind, unwrap, wrap
from xlbridge.contracts.options import CsvEncoding, CsvWriterOptions, EncryptionOptions
from xlbridge.contracts.responses import GroupMeta, OperationSpec, PropertyDefault
from xlbridge.contracts.results import (
    COMMAND_OK,
    ERROR,
    OK,
    CanonicalResult,
    CommandOk,
    Convention,
    Err,
    ErrorCode,
    Marker,
    QueryOk,
    is_ok,
)

__all__ = [
    "ArgumentError",
    "BridgeError",
    "COMMAND_OK",
    "CanonicalResult",
    "CommandOk",
    "ContractViolation",
    "Convention",
    "CsvEncoding",
    "CsvWriterOptions",
    "ERROR",
    "EncryptionOptions",
    "Err",
    "ErrorCode",
    "ErrorDetail",
    "GroupMeta",
    "Handle",
    "HandleKind",
    "Marker",
    "Metrics",
    "OK",
    "OperationFailed",
    "OperationSpec",
    "PropertyDefault",
    "QueryOk",
    "ResponseEnvelope",
    "Target",
    "WarningDetail",
    "is_ok",
    "unwrap",
    "unwrap_value",
    "wrap",
]
