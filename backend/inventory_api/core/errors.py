"""Error hierarchy for the inventory API.

Every error carries a short label ("Invalid input", "Not found",
"Server error"), a human readable message and the HTTP status it maps to.
The global handlers in ``api.error_handlers`` turn them into the
``{"error": label, "message": message}`` envelope.
"""


class InventoryError(Exception):
    """Base exception for all inventory errors."""

    def __init__(self, message: str, label: str = "Server error", http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.label = label
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.label, "message": self.message}


class ProductValidationError(InventoryError):
    """Request data failed a product field check."""

    def __init__(self, message: str):
        super().__init__(message, "Invalid input", 400)


class ProductNotFoundError(InventoryError):
    """No product with the requested id."""

    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found", "Not found", 404)
        self.product_id = product_id


class StorageError(InventoryError):
    """Reading or writing the products file failed."""

    def __init__(self, message: str):
        super().__init__(message, "Server error", 500)
