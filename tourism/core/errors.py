"""Domain errors raised by the data access layer and mapped to HTTP by the app."""


class StoreUnavailableError(RuntimeError):
    """A write was attempted while no database is configured."""

    def __init__(self, message: str = "Database not available") -> None:
        super().__init__(message)


class CategoryInUseError(Exception):
    """A category cannot be removed while places still carry its name."""

    def __init__(self, name: str, place_count: int) -> None:
        self.name = name
        self.place_count = place_count
        super().__init__(f"Category '{name}' is still used by {place_count} place(s)")


class StorageUnavailableError(RuntimeError):
    """An upload was attempted while no blob storage bucket is configured."""

    def __init__(self, message: str = "File storage not configured") -> None:
        super().__init__(message)
