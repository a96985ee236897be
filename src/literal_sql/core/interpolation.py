"""
Template interpolation.

Merges the literal segments of a template with its embedded values. Each
value is resolved to one of three outputs:

- ``None`` becomes the literal ``NULL`` and consumes no parameter slot
- raw-inline values (``Raw`` text, sub-queries) are emitted verbatim
- anything else is stored as the next positional parameter and replaced by
  its ``$N`` placeholder

A mapping is a "parameter object": its single value is the parameter.
"""

import string
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Optional, Sequence, Tuple, Type

from literal_sql.config import get_settings
from literal_sql.core.parameters import positional_placeholder
from literal_sql.errors import ParameterObjectError, TemplateError
from literal_sql.utils.logging import get_logger

logger = get_logger(__name__)

NULL = "NULL"

_formatter = string.Formatter()


class Raw(str):
    """Text inlined verbatim into a fragment, never turned into a parameter.

    Example:
        >>> sql("SELECT * FROM users ORDER BY {} DESC", Raw("created_at"))
    """

    __slots__ = ()


@dataclass(frozen=True)
class SQLTemplate:
    """Literal segments interleaved with values; one more segment than values."""

    segments: Tuple[str, ...]
    values: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if len(self.segments) != len(self.values) + 1:
            raise TemplateError(
                f"A template with {len(self.values)} values needs "
                f"{len(self.values) + 1} segments, got {len(self.segments)}"
            )

    @classmethod
    def from_format(
        cls,
        template: str,
        args: Sequence[Any] = (),
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> "SQLTemplate":
        """
        Split a ``str.format`` style template into segments and values.

        ``{}`` and ``{0}`` take positional arguments, ``{name}`` takes keyword
        arguments, ``{user.id}`` and ``{row[0]}`` look up attributes and
        items. ``{{`` and ``}}`` are literal braces.

        Args:
            template: Template text
            args: Positional values
            kwargs: Keyword values

        Returns:
            SQLTemplate with the looked-up values

        Raises:
            TemplateError: Malformed template, missing value, mixed automatic
                and manual numbering, or a conversion/format spec
        """
        kwargs = kwargs or {}
        segments = [""]
        values = []
        next_index = 0
        numbering = None

        try:
            parsed = list(_formatter.parse(template))
        except ValueError as e:
            raise TemplateError(f"Malformed template {template!r}: {e}") from e

        for literal, field_name, format_spec, conversion in parsed:
            segments[-1] += literal
            if field_name is None:
                continue
            if format_spec or conversion:
                raise TemplateError(
                    f"Replacement field {{{field_name}}} must not carry a "
                    "conversion or format spec"
                )

            if field_name == "" or field_name[0] in ".[":
                style = "automatic"
                field_name = f"{next_index}{field_name}"
                next_index += 1
            else:
                style = "manual" if field_name[0].isdigit() else numbering
            if numbering and style and style != numbering:
                raise TemplateError(
                    "Cannot mix automatic and manual replacement field numbering"
                )
            numbering = style or numbering

            try:
                value, _ = _formatter.get_field(field_name, args, kwargs)
            except (IndexError, KeyError, AttributeError, TypeError) as e:
                raise TemplateError(
                    f"No value for replacement field {{{field_name}}}"
                ) from e

            values.append(value)
            segments.append("")

        return cls(tuple(segments), tuple(values))


def to_template(
    template: Any,
    args: Sequence[Any] = (),
    kwargs: Optional[Dict[str, Any]] = None,
) -> SQLTemplate:
    """
    Normalize any accepted template shape into an ``SQLTemplate``.

    Accepted shapes are a format-style string, an ``SQLTemplate``, or an
    object exposing ``strings`` and ``values`` such as a Python 3.14
    template string.
    """
    if isinstance(template, SQLTemplate):
        if args or kwargs:
            raise TemplateError("SQLTemplate already carries its values")
        return template
    if isinstance(template, str):
        return SQLTemplate.from_format(template, args, kwargs)
    if hasattr(template, "strings") and hasattr(template, "values"):
        if args or kwargs:
            raise TemplateError("Template strings already carry their values")
        return SQLTemplate(tuple(template.strings), tuple(template.values))
    raise TemplateError(
        f"Expected a str or template, got {type(template).__name__}"
    )


@dataclass(frozen=True)
class Interpolation:
    """Result of interpolating one template."""

    text: str
    params: Mapping
    param_counter: int


def _param_object_value(value: Mapping, strict: bool) -> Any:
    keys = list(value.keys())
    if len(keys) == 1:
        return value[keys[0]]
    if strict:
        raise ParameterObjectError(
            keys,
            f"Parameter objects must hold exactly one key, got {len(keys)}: {keys}",
        )
    logger.warning(
        "interpolation.param_object_truncated",
        kept_key=str(keys[0]) if keys else None,
        dropped_keys=[str(k) for k in keys[1:]],
    )
    return value[keys[0]] if keys else None


def interpolate(
    template: SQLTemplate,
    params: Mapping,
    param_counter: int,
    *,
    inline_types: Tuple[Type[Any], ...] = (Raw,),
    strict: Optional[bool] = None,
) -> Interpolation:
    """
    Resolve every value of ``template`` and join it with its segments.

    New parameters are numbered after ``param_counter``; the given ``params``
    mapping is copied, never modified.

    Args:
        template: Segments and values to merge
        params: Existing positional parameters keyed 1..param_counter
        param_counter: Highest parameter number assigned so far
        inline_types: Value types emitted verbatim via ``str()``
        strict: Reject parameter objects without exactly one key; defaults
            to the ``strict_param_objects`` setting

    Returns:
        Interpolation with the text, the extended parameters and counter
    """
    if strict is None:
        strict = get_settings().strict_param_objects

    new_params = dict(params)
    counter = param_counter
    parts = [template.segments[0]]

    for value, segment in zip(template.values, template.segments[1:]):
        if value is None:
            parts.append(NULL)
        elif isinstance(value, inline_types):
            parts.append(str(value))
        else:
            if isinstance(value, Mapping):
                value = _param_object_value(value, strict)
            counter += 1
            new_params[counter] = value
            parts.append(positional_placeholder(counter))
        parts.append(segment)

    logger.debug(
        "interpolation.completed",
        values=len(template.values),
        params_added=counter - param_counter,
    )
    return Interpolation("".join(parts), MappingProxyType(new_params), counter)
