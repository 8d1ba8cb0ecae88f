# -*- encoding: utf-8 -*-
"""
Graph checks for the credential model.

Self-referential relations (contains, has_unit, unit_of, has_part,
specialisation_of) must stay acyclic. Nodes are compared by their URI id,
so two distinct objects carrying the same id count as the same node.

All walks use an explicit stack; hierarchy depth is bounded by memory only.
"""

from dataclasses import fields, is_dataclass
from typing import Any, Iterable, Iterator

from ..errors import InvalidIdentifierError, StructuralCycleError
from .values import Identifier


def related(node: Any, relation: str) -> list:
    """Direct neighbours of a node along a relation (tuple, single or None)."""
    value = getattr(node, relation, None)
    if value is None:
        return []
    if isinstance(value, tuple):
        return list(value)
    return [value]


def check_relation(node: Any, relation: str, exclusive: bool = False) -> None:
    """
    Check that following a relation from node never reaches node again.

    Args:
        node: Entity whose outgoing edges are checked
        relation: Attribute name of the self-referential relation
        exclusive: Also reject any node reachable twice (single ownership)

    Raises:
        StructuralCycleError: on a cycle, or a shared node when exclusive
    """
    stack = related(node, relation)
    seen: set[str] = set()
    while stack:
        current = stack.pop()
        if current.id == node.id:
            raise StructuralCycleError(relation, node.id)
        if current.id in seen:
            if exclusive:
                raise StructuralCycleError(relation, current.id)
            continue
        seen.add(current.id)
        stack.extend(related(current, relation))


def iter_entities(root: Any) -> Iterator[Any]:
    """
    Yield every entity reachable from root, each object once.

    An entity is any dataclass instance with an id attribute.
    """
    stack = [root]
    visited: set[int] = set()
    while stack:
        node = stack.pop()
        if id(node) in visited:
            continue
        visited.add(id(node))
        yield node
        for value in _dataclass_values(node):
            for item in _flatten(value):
                if is_dataclass(item) and hasattr(item, "id") and id(item) not in visited:
                    stack.append(item)


def _dataclass_values(node: Any) -> Iterator[Any]:
    for f in fields(node):
        yield getattr(node, f.name)


def _flatten(value: Any) -> Iterable[Any]:
    if isinstance(value, tuple):
        return value
    return (value,)


def _identifiers(entity: Any) -> Iterator[Identifier]:
    for value in _dataclass_values(entity):
        for item in _flatten(value):
            if isinstance(item, Identifier):
                yield item


def validate_graph(credential: Any) -> None:
    """
    Re-check the structural invariants of a whole credential graph.

    Checks every self-referential relation of every reachable entity for
    cycles (contains also for exclusive ownership), and that no identifier
    (scheme, content) is attached to two different entities of one kind.

    Raises:
        StructuralCycleError: on a cycle or shared contained credential
        InvalidIdentifierError: on conflicting identifiers
    """
    owners: dict[tuple[str, Any, str], str] = {}
    for entity in iter_entities(credential):
        kind = type(entity)
        for relation in getattr(kind, "self_relations", ()):
            check_relation(entity, relation, exclusive=relation in getattr(kind, "exclusive_relations", ()))
        for identifier in _identifiers(entity):
            scheme_id, content = identifier.scope_key
            key = (kind.__name__, scheme_id, content)
            owner = owners.setdefault(key, entity.id)
            if owner != entity.id:
                raise InvalidIdentifierError(
                    f"{kind.__name__} identifier {content!r} used by both {owner!r} and {entity.id!r}",
                    content=content,
                    scheme_id=scheme_id,
                )
