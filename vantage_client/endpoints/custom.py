"""Any Alpha Vantage function this package has no dedicated builder for."""

from __future__ import annotations

from typing import Any, TypeVar, overload

from pydantic import BaseModel, ValidationError

from vantage_client.decoder import ResponseEnvelope
from vantage_client.errors import DecodeError, EmptyResponseError

from .common import QueryBuilder

ModelT = TypeVar("ModelT", bound=BaseModel)


class CustomHelper(ResponseEnvelope):
    def convert(self) -> dict[str, Any]:
        self.raise_for_sentinel()
        payload = self.extra_sections
        if not payload:
            raise EmptyResponseError()
        return payload


class CustomBuilder(QueryBuilder[dict[str, Any]]):
    """Builder for ``function`` with free-form parameters.

    ``json()`` returns the payload as a dict, or validated into ``model`` when
    one is given. The usual sentinel checks still apply.
    """

    helper = CustomHelper

    def __init__(self, api_client, function: str) -> None:
        super().__init__(api_client)
        self.function = function

    def _required_params(self) -> dict[str, str]:
        return {"function": self.function}

    def param(self, key: str, value: Any) -> "CustomBuilder":
        self._set(key, value)
        return self

    @overload
    async def json(self) -> dict[str, Any]: ...

    @overload
    async def json(self, model: type[ModelT]) -> ModelT: ...

    async def json(self, model: type[ModelT] | None = None) -> dict[str, Any] | ModelT:
        payload = await super().json()
        if model is None:
            return payload
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"Could not decode {self.function} response into {model.__name__}") from exc


__all__ = ["CustomBuilder", "CustomHelper"]
