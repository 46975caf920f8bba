from __future__ import annotations


class NoValuePresentError(LookupError):
    def __init__(self, message: str = "No value present"):
        super().__init__(message); self.message = message
