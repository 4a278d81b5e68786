# ============================================================================
# CODE TEMPLATES
# ============================================================================
# STATUS: Core - Jinja2 templates for generated data-access modules
# PURPOSE: Text of the generated module, rendered by DataAccessGenerator
# CREATED: 19 OCT 2026
# ============================================================================
"""
Code Templates

Rendered with trim_blocks/lstrip_blocks, so block tags take no room in
the output. Context:

    version, source_name, type_name, table_name, runtime, import_from,
    const (upper-snake prefix), func (snake prefix), queries (QuerySet),
    columns (list of {name, attribute}), primary ({name, attribute,
    auto_increment})

Runtime contract used by generated code:
    condition(query, clause) -> str
    select(query, params) -> iterable of row mappings
    get(query, params=None) -> scalar
    named_exec(query, params) -> result with .lastrowid
"""

MODULE_TEMPLATE = '''\
# Code generated by model_maker {{ version }}{% if source_name %} from {{ source_name }}{% endif %}. DO NOT EDIT.
"""
Data access for {{ type_name }} (table {{ table_name }}).
"""

from typing import Any, Dict, List

import {{ runtime }}

from {{ import_from }} import {{ type_name }}

{{ const }}_COUNT = {{ queries.count | pystr }}
{{ const }}_SELECT = {{ queries.select | pystr }}
{{ const }}_UPDATE = {{ queries.update | pystr }}
{{ const }}_INSERT = {{ queries.insert | pystr }}


def _{{ func }}_params(model: {{ type_name }}) -> Dict[str, Any]:
    return {
{% for column in columns %}
        {{ column.name | pystr }}: model.{{ column.attribute }},
{% endfor %}
    }


def _{{ func }}_from_row(row) -> {{ type_name }}:
    return {{ type_name }}(
{% for column in columns %}
        {{ column.attribute }}=row[{{ column.name | pystr }}],
{% endfor %}
    )


def {{ func }}_select_limit(limit: int) -> List[{{ type_name }}]:
    query = {{ runtime }}.condition({{ const }}_SELECT, "LIMIT :limit")
    rows = {{ runtime }}.select(query, {"limit": limit})
    return [_{{ func }}_from_row(row) for row in rows]


def {{ func }}_count() -> int:
    return {{ runtime }}.get({{ const }}_COUNT)


def {{ func }}_insert(model: {{ type_name }}) -> {{ type_name }}:
{% if primary.auto_increment %}
    result = {{ runtime }}.named_exec({{ const }}_INSERT, _{{ func }}_params(model))
    model.{{ primary.attribute }} = result.lastrowid
{% else %}
    {{ runtime }}.named_exec({{ const }}_INSERT, _{{ func }}_params(model))
{% endif %}
    return model


def {{ func }}_update(model: {{ type_name }}) -> None:
    {{ runtime }}.named_exec({{ const }}_UPDATE, _{{ func }}_params(model))
'''


__all__ = ["MODULE_TEMPLATE"]
