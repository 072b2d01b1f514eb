"""Helpers shared by the entity services."""

from __future__ import annotations

from typing import Any, Dict, List, Type, TypeVar, Union

from ..models.base import ZohoModel, ZohoRequest
from ..zoho_client import ZohoApiError

RequestT = TypeVar("RequestT", bound=ZohoRequest)
ModelT = TypeVar("ModelT", bound=ZohoModel)


def as_request(payload: Union[RequestT, Dict[str, Any]], model: Type[RequestT]) -> RequestT:
    """Accept either the request model or a plain dict shaped like it."""
    if isinstance(payload, model):
        return payload
    return model.model_validate(payload)


def unwrap(data: Dict[str, Any], key: str, model: Type[ModelT]) -> ModelT:
    """Parse the entity Zoho nests under ``key`` in its response envelope."""
    entity = data.get(key)
    if not isinstance(entity, dict):
        raise ZohoApiError(f"Response has no '{key}' object: {sorted(data)}")
    return model.model_validate(entity)


def unwrap_list(data: Dict[str, Any], key: str, model: Type[ModelT]) -> List[ModelT]:
    items = data.get(key)
    if not isinstance(items, list):
        raise ZohoApiError(f"Response has no '{key}' list: {sorted(data)}")
    return [model.model_validate(item) for item in items]
