"""Constructors for every error the service can report.

Each returns an ``Err`` so call sites can ``return invalid_case(...)``
directly from a function typed ``Result[..., AppError]``.
"""
from .types import AppError, Err, ErrorCode, ErrorContext


def _err(code: ErrorCode, message: str, origin: str, cause: Exception | None = None, **metadata) -> Err[AppError]:
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause,
    ))


# E2xxx: bad input

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    return _err(code, message, origin, **metadata)


def invalid_case(label: str, allowed: list[str], origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Unknown case label '{label}', expected one of {', '.join(allowed)}",
        code=ErrorCode.E2030_INVALID_CASE,
        origin=origin,
        field="case",
        value=label,
        allowed=allowed,
    )


def malformed_name(name: str, token_count: int, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Full name must be 'Surname Given Patronymic', got {token_count} word(s)",
        code=ErrorCode.E2031_MALFORMED_NAME,
        origin=origin,
        field="name",
        value=name,
        token_count=token_count,
    )


# E5xxx: the tables cannot decline the input

def business_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E5000_BUSINESS_GENERIC,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    return _err(code, message, origin, **metadata)


def gender_undetermined(name: str, origin: str = "") -> Err[AppError]:
    return business_error(
        f"Could not determine gender for '{name}'",
        code=ErrorCode.E5030_GENDER_UNDETERMINED,
        origin=origin,
        name=name,
    )


def inflection_failed(word: str, part_type: str, case: str, origin: str = "") -> Err[AppError]:
    return business_error(
        f"No rule declines '{word}' ({part_type}) to {case}",
        code=ErrorCode.E5031_INFLECTION_FAILED,
        origin=origin,
        word=word,
        part_type=str(part_type),
        case=case,
    )


# E6xxx: rule and gender sources

def config_load_failed(
    source: str,
    reason: str,
    *,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """A rule or gender table that could not be read, parsed or validated."""
    return _err(
        ErrorCode.E6020_CONFIG_LOAD_FAILED,
        f"Failed to load {source}: {reason}",
        origin,
        cause,
        source=source,
        **metadata,
    )


# E9xxx

def internal_error(message: str, *, origin: str = "", cause: Exception | None = None, **metadata) -> Err[AppError]:
    return _err(ErrorCode.E9001_UNEXPECTED_ERROR, message, origin, cause, **metadata)
