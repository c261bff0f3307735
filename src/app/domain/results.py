"""Resultado de operações de sincronização expostas pela API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Resultado no formato {success, message?, error?, data?}."""

    success: bool
    message: str | None = None
    error: str | None = None
    data: Any = None
    status_code: int = 200

    @classmethod
    def ok(cls, message: str, data: Any = None) -> OperationResult:
        return cls(success=True, message=message, data=data)

    @classmethod
    def failed(cls, error: str, status_code: int = 200) -> OperationResult:
        return cls(success=False, error=error, status_code=status_code)

    def as_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success}
        if self.message is not None:
            body["message"] = self.message
        if self.error is not None:
            body["error"] = self.error
        if self.data is not None:
            body["data"] = self.data
        return body
