"""
Translation of FilterConditions into backend-native filter syntax.

Conditions are always conjunctive: every one must hold.

- to_metadata_predicate(): callable over document metadata, for the local
  FAISS store
- to_payload_filter(): {"must": [...]} payload filter for a Qdrant-style
  vector database
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping

from .query.types import FilterCondition, FilterOperator, NumericRange


MetadataPredicate = Callable[[Mapping[str, Any]], bool]


def _matches_equals(value: Any, operand: str) -> bool:
    return value == operand


def _matches_text(value: Any, operand: str) -> bool:
    """Every token of the operand appears in the field text (case-insensitive)."""
    if not isinstance(value, str):
        return False
    field_tokens = set(value.lower().split())
    return all(token in field_tokens for token in operand.lower().split())


def _matches_any(value: Any, operand: tuple) -> bool:
    if not value:
        return False
    values = {value} if isinstance(value, str) else set(value)
    return bool(values.intersection(operand))


def _matches_range(value: Any, operand: NumericRange) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return operand.contains(float(value))
    except (TypeError, ValueError):
        return False


_MATCHERS = {
    FilterOperator.EQUALS: _matches_equals,
    FilterOperator.TEXT_MATCH: _matches_text,
    FilterOperator.ANY_OF: _matches_any,
    FilterOperator.RANGE: _matches_range,
}


def condition_matches(condition: FilterCondition, metadata: Mapping[str, Any]) -> bool:
    """Evaluate a single condition against one record's metadata."""
    value = metadata.get(condition.field.value)
    return _MATCHERS[condition.operator](value, condition.operand)


def to_metadata_predicate(conditions: Iterable[FilterCondition]) -> MetadataPredicate:
    """
    Build a predicate that accepts metadata satisfying all conditions.

    An empty condition list accepts everything.
    """
    conditions = tuple(conditions)

    def predicate(metadata: Mapping[str, Any]) -> bool:
        return all(condition_matches(condition, metadata) for condition in conditions)

    return predicate


def to_payload_condition(condition: FilterCondition) -> Dict[str, Any]:
    key = condition.field.value
    operand = condition.operand

    if condition.operator == FilterOperator.EQUALS:
        return {"key": key, "match": {"value": operand}}
    if condition.operator == FilterOperator.TEXT_MATCH:
        # needs a full-text payload index on the field
        return {"key": key, "match": {"text": operand}}
    if condition.operator == FilterOperator.ANY_OF:
        return {"key": key, "match": {"any": list(operand)}}
    return {"key": key, "range": operand.to_dict()}


def to_payload_filter(conditions: Iterable[FilterCondition]) -> Dict[str, List[Dict[str, Any]]]:
    """Render conditions as a {"must": [...]} payload filter."""
    return {"must": [to_payload_condition(condition) for condition in conditions]}
