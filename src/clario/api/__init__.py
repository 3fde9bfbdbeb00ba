"""Backend access: the httpx-based REST client for /todos."""

from ..core.ports import ApiResponse, TodoApiError
from .client import TodoApiClient

__all__ = ["ApiResponse", "TodoApiClient", "TodoApiError"]
