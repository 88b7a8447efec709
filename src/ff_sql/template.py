"""
Statement construction from templates.

sql() accepts either a format string:

    sql("SELECT * FROM {} WHERE id = {}", identifier("users"), user_id)
    sql("SELECT * FROM {table} WHERE id = {id}", table=identifier("users"), id=user_id)

or the raw segment/expression shape, with one more segment than expressions:

    sql(["SELECT * FROM ", " WHERE id = ", ""], identifier("users"), user_id)

Literal braces in a format string are written {{ and }}.
"""

from string import Formatter
from typing import Any, List, Sequence, Tuple, Union

from .exceptions import TemplateError
from .fragments import Fragment, LiteralFragment, Statement, bind

_FORMATTER = Formatter()


def sql(template: Union[str, Sequence[str]], *expressions: Any, **named: Any) -> Statement:
    """
    Build a Statement from a template.

    Args:
        template: Format string, or sequence of literal segments
        *expressions: Interpolated expressions, in order
        **named: Named expressions (format strings only)

    Returns:
        Statement alternating literal segments and bound expressions

    Raises:
        TemplateError: If a format string is malformed or references a
            missing expression
    """
    if isinstance(template, str):
        segments, expressions = _parse_format(template, expressions, named)
    else:
        segments = list(template)
    return _interleave(segments, expressions)


def _interleave(segments: Sequence[str], expressions: Sequence[Any]) -> Statement:
    parts: List[Fragment] = []
    for idx, segment in enumerate(segments):
        parts.append(LiteralFragment(segment))
        if idx < len(expressions):
            parts.append(bind(expressions[idx]))
    return Statement(parts)


def _parse_format(
    template: str, args: Tuple[Any, ...], kwargs: dict
) -> Tuple[List[str], List[Any]]:
    """Split a format string into literal segments and the expressions between them."""
    segments: List[str] = []
    expressions: List[Any] = []
    pending = ""
    auto_index = 0
    numbering = None

    try:
        parsed = list(_FORMATTER.parse(template))
    except ValueError as e:
        raise TemplateError(str(e), template) from e

    for literal_text, field_name, format_spec, conversion in parsed:
        pending += literal_text
        if field_name is None:
            continue
        if conversion or format_spec:
            raise TemplateError(
                f"Field {{{field_name}}} must not use a conversion or format spec", template
            )

        if field_name == "":
            if numbering == "manual":
                raise TemplateError(
                    "Cannot switch from manual field numbering to automatic", template
                )
            numbering = "auto"
            key: Union[int, str] = auto_index
            auto_index += 1
        elif field_name.isdigit():
            if numbering == "auto":
                raise TemplateError(
                    "Cannot switch from automatic field numbering to manual", template
                )
            numbering = "manual"
            key = int(field_name)
        elif field_name.isidentifier():
            key = field_name
        else:
            raise TemplateError(f"Unsupported field {{{field_name}}}", template)

        segments.append(pending)
        pending = ""
        expressions.append(_lookup(key, args, kwargs, template))

    segments.append(pending)
    return segments, expressions


def _lookup(key: Union[int, str], args: Tuple[Any, ...], kwargs: dict, template: str) -> Any:
    if isinstance(key, int):
        if key >= len(args):
            raise TemplateError(
                f"Template references expression {key} but only {len(args)} given", template
            )
        return args[key]
    if key not in kwargs:
        raise TemplateError(f"Template references missing expression {key!r}", template)
    return kwargs[key]
