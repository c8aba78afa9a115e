"""
Query, update and bulk-write descriptors.

Repositories build these against model field names; the gateway renders
them into MongoDB syntax using the model's field aliases (e.g. store_id -> _id).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel

Aliases = Mapping[str, str]


def _resolve(name: str, aliases: Optional[Aliases]) -> str:
    if aliases is None:
        return name
    return aliases.get(name, name)


class ComparisonOperator(str, Enum):
    """Supported field comparison operators."""
    EQ = "$eq"
    NE = "$ne"
    GT = "$gt"
    GTE = "$gte"
    LT = "$lt"
    LTE = "$lte"
    IN = "$in"


class Filter:
    """Base class for filter descriptors. Compose with `&` and `|`."""

    def to_mongo(self, aliases: Optional[Aliases] = None) -> dict:
        raise NotImplementedError

    def __and__(self, other: "Filter") -> "Filter":
        return And(self, other)

    def __or__(self, other: "Filter") -> "Filter":
        return Or(self, other)


@dataclass(frozen=True)
class Empty(Filter):
    """Matches every document."""

    def to_mongo(self, aliases: Optional[Aliases] = None) -> dict:
        return {}


@dataclass(frozen=True)
class Comparison(Filter):
    field: str
    operator: ComparisonOperator
    value: Any

    def to_mongo(self, aliases: Optional[Aliases] = None) -> dict:
        name = _resolve(self.field, aliases)
        if self.operator is ComparisonOperator.EQ:
            return {name: self.value}
        value = list(self.value) if self.operator is ComparisonOperator.IN else self.value
        return {name: {self.operator.value: value}}


@dataclass(frozen=True, init=False)
class And(Filter):
    filters: tuple[Filter, ...]

    def __init__(self, *filters: Filter):
        object.__setattr__(self, "filters", tuple(filters))

    def to_mongo(self, aliases: Optional[Aliases] = None) -> dict:
        return {"$and": [f.to_mongo(aliases) for f in self.filters]}


@dataclass(frozen=True, init=False)
class Or(Filter):
    filters: tuple[Filter, ...]

    def __init__(self, *filters: Filter):
        object.__setattr__(self, "filters", tuple(filters))

    def to_mongo(self, aliases: Optional[Aliases] = None) -> dict:
        return {"$or": [f.to_mongo(aliases) for f in self.filters]}


EMPTY = Empty()


def Eq(field: str, value: Any) -> Comparison:
    return Comparison(field, ComparisonOperator.EQ, value)


def Ne(field: str, value: Any) -> Comparison:
    return Comparison(field, ComparisonOperator.NE, value)


def Gt(field: str, value: Any) -> Comparison:
    return Comparison(field, ComparisonOperator.GT, value)


def Gte(field: str, value: Any) -> Comparison:
    return Comparison(field, ComparisonOperator.GTE, value)


def Lt(field: str, value: Any) -> Comparison:
    return Comparison(field, ComparisonOperator.LT, value)


def Lte(field: str, value: Any) -> Comparison:
    return Comparison(field, ComparisonOperator.LTE, value)


def In(field: str, values: Any) -> Comparison:
    return Comparison(field, ComparisonOperator.IN, tuple(values))


@dataclass(frozen=True)
class Update:
    """
    Partial update descriptor.

    Usage:
        Update().set("name", "New name").unset("avatar_id")
    """
    operations: tuple[tuple[str, str, Any], ...] = ()

    def set(self, field: str, value: Any) -> "Update":
        return Update(self.operations + (("$set", field, value),))

    def unset(self, field: str) -> "Update":
        return Update(self.operations + (("$unset", field, ""),))

    def inc(self, field: str, amount: int | float = 1) -> "Update":
        return Update(self.operations + (("$inc", field, amount),))

    def to_mongo(self, aliases: Optional[Aliases] = None) -> dict:
        if not self.operations:
            raise ValueError("Update has no operations")
        rendered: dict[str, dict[str, Any]] = {}
        for operator, name, value in self.operations:
            rendered.setdefault(operator, {})[_resolve(name, aliases)] = value
        return rendered


# ==================== Bulk write operations ====================

@dataclass(frozen=True)
class InsertOne:
    document: BaseModel


@dataclass(frozen=True)
class UpdateOne:
    filter: Filter
    update: Update
    upsert: bool = False


@dataclass(frozen=True)
class UpdateMany:
    filter: Filter
    update: Update
    upsert: bool = False


@dataclass(frozen=True)
class ReplaceOne:
    filter: Filter
    document: BaseModel
    upsert: bool = False


@dataclass(frozen=True)
class DeleteOne:
    filter: Filter


@dataclass(frozen=True)
class DeleteMany:
    filter: Filter


WriteOperation = InsertOne | UpdateOne | UpdateMany | ReplaceOne | DeleteOne | DeleteMany


@dataclass(frozen=True)
class BulkWriteOptions:
    ordered: bool = True
    bypass_document_validation: bool = False


__all__ = [
    "Filter",
    "Empty",
    "EMPTY",
    "Comparison",
    "ComparisonOperator",
    "And",
    "Or",
    "Eq",
    "Ne",
    "Gt",
    "Gte",
    "Lt",
    "Lte",
    "In",
    "Update",
    "InsertOne",
    "UpdateOne",
    "UpdateMany",
    "ReplaceOne",
    "DeleteOne",
    "DeleteMany",
    "WriteOperation",
    "BulkWriteOptions",
]
