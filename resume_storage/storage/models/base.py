from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Self, dataclass_transform

MISSING = object()


def mapped(column: bool = True, **kwargs: Any):
    metadata = kwargs.pop("metadata", {})
    # column=False: поле живет вне таблицы модели (например, в contact)
    metadata.setdefault("column", column)
    return field(metadata=metadata, **kwargs)


@dataclass_transform(field_specifiers=(field, mapped))
class BaseModel:
    def __init_subclass__(cls, /, **kwargs: Any):
        super().__init_subclass__()
        dataclass(cls, kw_only=True, **kwargs)

    @classmethod
    def columns(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.metadata.get("column", True)]

    @classmethod
    def from_db(cls, data: Mapping[str, Any]) -> Self:
        kwargs = {}
        for name in cls.columns():
            value = data.get(name, MISSING)
            # Если значения нет, то срабатывает значение по умолчанию
            if value is MISSING:
                continue
            kwargs[name] = value
        return cls(**kwargs)

    def to_db(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.columns()}
