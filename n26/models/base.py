"""Shared base classes for N26 API data models."""

from typing import Generic, Iterator, List, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, model_validator
from pydantic.alias_generators import to_camel


class N26Model(BaseModel):
    """Immutable snapshot of one JSON object returned by the API.

    Fields are declared in snake_case and map to the upstream camelCase keys.
    Every field has a zero-value default; null or absent keys decode to it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    @model_validator(mode="before")
    @classmethod
    def null_means_default(cls, data):
        """Treat JSON null like a missing key so every field falls back to its zero value."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_pretty_json(self) -> str:
        """Indented JSON rendering using the upstream key names."""
        return self.model_dump_json(by_alias=True, indent=2)


ItemT = TypeVar("ItemT")


class N26List(RootModel[List[ItemT]], Generic[ItemT]):
    """Immutable snapshot of a JSON array returned by the API."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[ItemT]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> ItemT:
        return self.root[index]

    def to_pretty_json(self) -> str:
        """Indented JSON rendering using the upstream key names."""
        return self.model_dump_json(by_alias=True, indent=2)
