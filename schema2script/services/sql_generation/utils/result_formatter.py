from typing import Any, Dict


def create_result_dictionary(status: str, message: str, **extra: Any) -> Dict[str, Any]:
    """Helper to create a consistent result dictionary.

    Args:
        status: "success" or "error".
        message: Human-readable outcome, shown as-is to the user.
        **extra: Operation-specific payload (schema, sql, output_file, ...).
    """
    result = {"status": status, "message": message}
    result.update(extra)
    return result


def success(message: str, **extra: Any) -> Dict[str, Any]:
    return create_result_dictionary("success", message, **extra)


def error(message: str, **extra: Any) -> Dict[str, Any]:
    return create_result_dictionary("error", message, **extra)
