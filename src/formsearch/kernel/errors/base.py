"""Root of the formsearch error hierarchy.

Every error carries a stable ``code`` and a ``detail`` dict, so a rejected
form or a bad setting can be logged as one structured event or handed back
to a caller as JSON.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Error with a machine-readable ``code`` and structured ``detail``.

    *cause* is chained as ``__cause__``; ``str()`` renders a single JSON line.
    """

    default_code: str = "formsearch_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def with_detail(self, **values: Any) -> "BaseError":
        """Merge *values* into ``detail`` and return the error for re-raising."""
        self.detail.update(values)
        return self

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.__cause__ is not None:
            payload["cause"] = f"{type(self.__cause__).__name__}: {self.__cause__}"
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code}: {self.message})"


__all__ = ["BaseError"]
