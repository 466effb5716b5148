"""Error values shared by the engine, the API and the CLI.

Usage:
    from core.errors import Ok, Err, Result, AppError, inflection_failed

    def inflect(word: str) -> Result[str, AppError]:
        form = lookup(word)
        if form is None:
            return inflection_failed(word, "lastname", "РП", origin="inflector")
        return Ok(form)

    match engine.decline_word("Иванов", "ДП", "lastname"):
        case Ok(form):
            print(form)
        case Err(error):
            log.error(error.message, code=error.code.name)

HTTP integration lives in ``core.errors.handlers`` and is imported
separately so the engine does not depend on FastAPI.
"""
from .types import (
    AppError,
    Err,
    ErrorCode,
    ErrorContext,
    Ok,
    Result,
    sequence_results,
)
from .builders import (
    business_error,
    config_load_failed,
    gender_undetermined,
    inflection_failed,
    internal_error,
    invalid_case,
    malformed_name,
    validation_error,
)

__all__ = [
    "AppError",
    "Err",
    "ErrorCode",
    "ErrorContext",
    "Ok",
    "Result",
    "sequence_results",
    # E2xxx
    "validation_error",
    "invalid_case",
    "malformed_name",
    # E5xxx
    "business_error",
    "gender_undetermined",
    "inflection_failed",
    # E6xxx
    "config_load_failed",
    # E9xxx
    "internal_error",
]
