from hr_datatable.exceptions import DataTableError


class ErrorMapper:
    _KNOWN_CODES = {
        "UNKNOWN_COLUMN": ("The requested column does not exist in this table.", "Check the column id."),
        "INVALID_PAGE_SIZE": ("Unsupported number of rows per page.", "Pick 5, 10, 20 or 50 rows per page."),
        "PREFERENCE_READ_FAILED": ("Saved column layout could not be loaded.", "All columns are shown; adjust them again."),
        "PREFERENCE_WRITE_FAILED": ("Column layout could not be saved.", "The change applies to this session only."),
        "BULK_DELETE_FAILED": ("The selected rows could not be deleted.", "Refresh the table and try again."),
        "BULK_EDIT_FAILED": ("The selected rows could not be opened for editing.", "Try again with fewer rows."),
    }

    @classmethod
    def to_payload(cls, error: Exception) -> dict:
        if isinstance(error, DataTableError):
            message, suggestion = cls._KNOWN_CODES.get(
                error.code,
                (error.message, "Contact support if the problem persists."),
            )
            return {
                "code": error.code,
                "message": message,
                "details": error.details,
                "suggestion": suggestion,
            }
        return {
            "code": "INTERNAL_ERROR",
            "message": str(error) or error.__class__.__name__,
            "details": None,
            "suggestion": "Try again and report the problem if it persists.",
        }

    @classmethod
    def to_display_message(cls, error: Exception) -> str:
        payload = cls.to_payload(error)
        return f"[{payload['code']}] {payload['message']} {payload['suggestion']}"
