"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Datos no válidos."):
        """Initialize the error."""
        super().__init__(message, 400)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Recurso no encontrado."):
        """Initialize the error."""
        super().__init__(message, 404)


class TournamentSaveError(AppError):
    """Raised when the tournament document could not be written."""

    def __init__(self, message="Error al guardar los cambios."):
        """Initialize the error."""
        super().__init__(message, 500)


class BetPlacementError(AppError):
    """Raised when a bet could not be written to the ledger."""

    def __init__(self, message="Ocurrió un error al realizar la apuesta."):
        """Initialize the error."""
        super().__init__(message, 500)
