"""Core data models for doclets and the records derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# Keys consumed into typed fields; anything else a parser emits lands in ``extra``.
_KNOWN_KEYS = frozenset(
    {
        "kind",
        "name",
        "longname",
        "description",
        "meta",
        "examples",
        "see",
        "params",
        "properties",
        "type",
        "attribs",
        "version",
        "since",
        "memberof",
        "scope",
        "access",
        "undocumented",
        "ignore",
    }
)


@dataclass
class TypeSpec:
    """Declared type list, e.g. ``{"names": ["string", "number"]}``."""

    names: List[str] = field(default_factory=list)

    @classmethod
    def from_value(cls, value: Any) -> Optional["TypeSpec"]:
        if not isinstance(value, Mapping):
            return None
        names = value.get("names")
        if not isinstance(names, list):
            return None
        return cls(names=[str(name) for name in names])


@dataclass
class CodeInfo:
    """Parser notes about the code node a doclet was attached to."""

    name: Optional[str] = None
    type: Optional[str] = None
    value: Optional[str] = None


@dataclass
class DocletMeta:
    """Source location of a doclet."""

    filename: Optional[str] = None
    path: Optional[str] = None
    lineno: Optional[int] = None
    code: Optional[CodeInfo] = None

    @classmethod
    def from_value(cls, value: Any) -> Optional["DocletMeta"]:
        if not isinstance(value, Mapping):
            return None
        code_data = value.get("code")
        code = None
        if isinstance(code_data, Mapping):
            code = CodeInfo(
                name=_as_str(code_data.get("name")),
                type=_as_str(code_data.get("type")),
                value=_as_str(code_data.get("value")),
            )
        lineno = value.get("lineno")
        return cls(
            filename=_as_str(value.get("filename")),
            path=_as_str(value.get("path")),
            lineno=lineno if isinstance(lineno, int) else None,
            code=code,
        )


@dataclass
class Param:
    """A parameter or property entry."""

    name: str = ""
    type: Optional[TypeSpec] = None
    description: str = ""
    optional: bool = False
    default: Any = None

    @classmethod
    def from_value(cls, value: Mapping[str, Any]) -> "Param":
        return cls(
            name=_as_str(value.get("name")) or "",
            type=TypeSpec.from_value(value.get("type")),
            description=_as_str(value.get("description")) or "",
            optional=bool(value.get("optional", False)),
            default=value.get("defaultvalue"),
        )

    @property
    def type_names(self) -> List[str]:
        return list(self.type.names) if self.type else []


@dataclass(frozen=True)
class Example:
    """A normalized example block."""

    caption: str
    code: Any


@dataclass
class SourceFile:
    """Source file referenced by at least one doclet."""

    resolved: str
    shortened: Optional[str] = None


@dataclass
class Doclet:
    """One documented code entity.

    ``examples`` holds raw strings until the renderer normalizes it into
    :class:`Example` values; ``see`` is rewritten in place the same way.
    """

    kind: str = ""
    name: str = ""
    longname: str = ""
    description: Optional[str] = None
    meta: Optional[DocletMeta] = None
    examples: List[Any] = field(default_factory=list)
    see: List[str] = field(default_factory=list)
    params: List[Param] = field(default_factory=list)
    properties: List[Param] = field(default_factory=list)
    type: Optional[TypeSpec] = None
    attribs: str = ""
    version: Optional[str] = None
    since: Optional[str] = None
    memberof: Optional[str] = None
    scope: Optional[str] = None
    access: Optional[str] = None
    undocumented: bool = False
    ignore: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Doclet":
        """Build a doclet from a raw parser mapping, coercing malformed fields."""
        return cls(
            kind=_as_str(data.get("kind")) or "",
            name=_as_str(data.get("name")) or "",
            longname=_as_str(data.get("longname")) or "",
            description=_as_str(data.get("description")),
            meta=DocletMeta.from_value(data.get("meta")),
            examples=_as_list(data.get("examples")),
            see=[item for item in _as_list(data.get("see")) if isinstance(item, str)],
            params=_as_params(data.get("params")),
            properties=_as_params(data.get("properties")),
            type=TypeSpec.from_value(data.get("type")),
            attribs=_as_str(data.get("attribs")) or "",
            version=_as_str(data.get("version")),
            since=_as_str(data.get("since")),
            memberof=_as_str(data.get("memberof")),
            scope=_as_str(data.get("scope")),
            access=_as_str(data.get("access")),
            undocumented=bool(data.get("undocumented", False)),
            ignore=bool(data.get("ignore", False)),
            extra={key: value for key, value in data.items() if key not in _KNOWN_KEYS},
        )


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


def _as_params(value: Any) -> List[Param]:
    return [Param.from_value(item) for item in _as_list(value) if isinstance(item, Mapping)]


__all__ = [
    "CodeInfo",
    "Doclet",
    "DocletMeta",
    "Example",
    "Param",
    "SourceFile",
    "TypeSpec",
]
