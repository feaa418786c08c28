import json
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Type, TypeVar, Union

T = TypeVar("T", bound="ComplexSerializableType")


class ComplexSerializableType:
    """
    Base of objects that are stored as JSON. Subclasses must be direct descendants of this class and
    may override to_dict() and from_dict() when their attributes are not JSON-native.
    """

    @property
    def serialized_attributes(self) -> List[str]:
        return list(self.__dict__.keys())

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in self.serialized_attributes}

    @classmethod
    def from_dict(cls: Type[T], dct: Dict) -> T:
        try:
            return cls(**dct)
        except TypeError as e:
            raise TypeError(f"Dict: {dct} on {cls.__mro__}") from e

    def to_json(self, output_path: Union[str, Path]) -> None:
        with Path(output_path).open("w") as handle:
            json.dump(self, handle, indent=4, cls=CustomJSONEncoder, ensure_ascii=False)

    @classmethod
    def from_json(cls: Type[T], input_path: Union[str, Path]) -> T:
        with Path(input_path).open("r") as handle:
            obj = json.load(handle, cls=CustomJSONDecoder)
        if not isinstance(obj, cls):
            raise ValueError(f"{input_path} does not hold a serialized {cls.__name__}")
        return obj


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, ComplexSerializableType):
            return {**{"_type": type(obj).__name__}, **obj.to_dict()}
        if isinstance(obj, (set, frozenset)):
            return {"_type": "Set", "elements": sorted(obj)}
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, date):
            return obj.isoformat()
        if isinstance(obj, Path):
            return str(obj)
        return super().default(obj)


class CustomJSONDecoder(json.JSONDecoder):
    """
    Turns `{"_type": <name>, ...}` objects back into the ComplexSerializableType subclass of that name
    and `{"_type": "Set", "elements": [...]}` into sets.
    """

    def __init__(self, *args, **kwargs):
        json.JSONDecoder.__init__(self, object_hook=self.object_hook, *args, **kwargs)
        self.serializable_complex_types = {x.__name__: x for x in ComplexSerializableType.__subclasses__()}

    def object_hook(self, obj):
        if obj.get("_type") == "Set":
            return set(obj["elements"])
        if obj.get("_type") in self.serializable_complex_types:
            complex_type = obj.pop("_type")
            return self.serializable_complex_types[complex_type].from_dict(obj)
        return obj
