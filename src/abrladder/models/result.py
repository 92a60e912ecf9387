"""Result envelope returned by the ladder pipeline and profile helpers."""

from typing import Any

from pydantic import BaseModel, Field, model_validator


class LadderResult(BaseModel):
    """Either ``{ok: true, result: ...}`` or ``{ok: false, errors: [...]}``."""

    ok: bool
    result: dict[str, Any] | None = None
    errors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_consistency(self) -> "LadderResult":
        if self.ok and self.result is None:
            raise ValueError("successful result must carry a result")
        if not self.ok and not self.errors:
            raise ValueError("failed result must carry at least one error")
        return self

    @classmethod
    def success(cls, result: dict[str, Any]) -> "LadderResult":
        return cls(ok=True, result=result)

    @classmethod
    def failure(cls, errors: list[str]) -> "LadderResult":
        # de-duplicate, keeping first-seen order
        return cls(ok=False, errors=list(dict.fromkeys(errors)))

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "result": self.result}
        return {"ok": False, "errors": self.errors}
