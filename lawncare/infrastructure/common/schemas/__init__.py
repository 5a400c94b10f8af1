from .response_wrappers import ErrorResponse, SuccessResponse

__all__ = ["ErrorResponse", "SuccessResponse"]
