"""
Path-rule based redaction of nested trace records.

Each rule names dotted paths (see `trace_redaction.redactors.paths`) and an action:
- "mask": replace the value with the rule's replacement, or "[REDACTED]".
- "remove": delete the key from its parent dict.
- "hash": replace the value with "[HASH:xxxxxxxx]".

Traversal semantics:
- Lists (and tuples) are transparent at any depth: they never consume a segment, so
  "items.token" reaches "token" inside lists of dicts and lists of lists of dicts.
- A "*" directly followed by a final literal ("attributes.*.password") searches the
  current dict and its whole subtree for that key, at every depth.
- Any other "*" ("a.*.b.c") iterates exactly one level of keys.
- Dict and list values are skipped by "mask" and "hash"; "remove" deletes them.

Mismatches (missing keys, scalars where a dict was expected, empty segments) are
silent no-ops at the step where they occur; `redact` never raises for them.
"""
import copy
import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from trace_redaction.config.models import RedactionConfig, RedactionRuleModel
from trace_redaction.core.types import HashFunction
from trace_redaction.observability.types import RedactableRecord
from trace_redaction.redactors.abc import Redactor
from trace_redaction.redactors.hashing import HASH_FUNCTIONS
from trace_redaction.redactors.paths import compile_path
from trace_redaction.redactors.types import (
    REDACTION_PLACEHOLDER_VALUE,
    PathSegment,
    RedactionRule,
)

logger = logging.getLogger(__name__)

RuleLike = Union[RedactionRule, RedactionRuleModel, Mapping[str, Any]]

_SEQUENCE_TYPES = (list, tuple)
_CONTAINER_TYPES = (dict, list, tuple)


def _apply_to_leaf(
    parent: Any, key: str, rule: RedactionRuleModel, hash_value: Callable[[Any], str]
) -> None:
    if not isinstance(parent, dict) or key not in parent:
        return
    if rule.action == "remove":
        del parent[key]
        return
    value = parent[key]
    if isinstance(value, _CONTAINER_TYPES):
        logger.debug(f"Skipping '{rule.action}' on container value at key '{key}'.")
        return
    if rule.action == "mask":
        parent[key] = rule.replacement if rule.replacement is not None else REDACTION_PLACEHOLDER_VALUE
    elif rule.action == "hash":
        parent[key] = hash_value(value)


def _search_for_key(
    node: Any, target: str, rule: RedactionRuleModel, hash_value: Callable[[Any], str]
) -> None:
    if isinstance(node, _SEQUENCE_TYPES):
        for item in node:
            _search_for_key(item, target, rule, hash_value)
        return
    if not isinstance(node, dict):
        return
    for key in list(node.keys()):
        if key == target:
            _apply_to_leaf(node, key, rule, hash_value)
        if key in node:
            _search_for_key(node[key], target, rule, hash_value)


def _walk(
    node: Any,
    segments: Tuple[PathSegment, ...],
    index: int,
    rule: RedactionRuleModel,
    hash_value: Callable[[Any], str],
) -> None:
    if index >= len(segments) or node is None:
        return
    if isinstance(node, _SEQUENCE_TYPES):
        for item in node:
            _walk(item, segments, index, rule, hash_value)
        return
    if not isinstance(node, dict):
        return

    segment = segments[index]
    is_last = index == len(segments) - 1

    if segment.is_wildcard:
        final = segments[-1]
        if index == len(segments) - 2 and not final.is_wildcard:
            if final.key:
                _search_for_key(node, final.key, rule, hash_value)
        else:
            for value in list(node.values()):
                _walk(value, segments, index + 1, rule, hash_value)
        return

    if not segment.key:
        return
    if is_last:
        _apply_to_leaf(node, segment.key, rule, hash_value)
    elif segment.key in node:
        _walk(node[segment.key], segments, index + 1, rule, hash_value)


def redact_with_path_rules(
    record: RedactableRecord,
    rules: Sequence[RuleLike],
    hash_function: HashFunction = "rolling",
) -> RedactableRecord:
    """
    Returns a redacted deep copy of `record`, applying `rules` in order.
    Raises `pydantic.ValidationError` only if a rule itself is invalid.
    """
    return PathRuleRedactor(rules, hash_function=hash_function).redact(record)


class PathRuleRedactor(Redactor):
    plugin_id: str = "path_rule_redactor_v1"
    description: str = "Masks, removes or hashes trace record fields selected by dotted path rules with '*' and 'key[]' segments."

    def __init__(
        self,
        rules: Optional[Iterable[RuleLike]] = None,
        hash_function: HashFunction = "rolling",
    ):
        self._configure(RedactionConfig(rules=list(rules or ()), hash_function=hash_function))

    def _configure(self, config: RedactionConfig) -> None:
        self._rules: Tuple[RedactionRuleModel, ...] = tuple(config.rules)
        self._compiled: Tuple[Tuple[RedactionRuleModel, Tuple[Tuple[PathSegment, ...], ...]], ...] = tuple(
            (rule, tuple(compile_path(path) for path in rule.paths)) for rule in self._rules
        )
        self._hash_function: HashFunction = config.hash_function
        self._hash_value = HASH_FUNCTIONS[config.hash_function]
        logger.debug(
            f"{self.plugin_id}: Configured with {len(self._rules)} rule(s), hash function '{self._hash_function}'."
        )

    @property
    def rules(self) -> Tuple[RedactionRuleModel, ...]:
        return self._rules

    @property
    def hash_function(self) -> HashFunction:
        return self._hash_function

    async def setup(self, config: Optional[Dict[str, Any]] = None) -> None:
        cfg = config or {}
        if "rules" not in cfg and "hash_function" not in cfg:
            logger.debug(f"{self.plugin_id}: No rules in setup config; keeping {len(self._rules)} constructor rule(s).")
            return
        try:
            parsed = RedactionConfig.model_validate(
                {"rules": cfg.get("rules", list(self._rules)), "hash_function": cfg.get("hash_function", self._hash_function)}
            )
        except ValidationError as e:
            logger.error(f"{self.plugin_id}: Invalid redaction configuration: {e}", exc_info=True)
            raise
        self._configure(parsed)
        logger.info(f"{self.plugin_id}: Initialized with {len(self._rules)} rule(s).")

    def redact(self, record: RedactableRecord) -> RedactableRecord:
        redacted = copy.deepcopy(record)
        for rule, compiled_paths in self._compiled:
            for segments in compiled_paths:
                _walk(redacted, segments, 0, rule, self._hash_value)
        return redacted

    async def teardown(self) -> None:
        logger.debug(f"{self.plugin_id}: Teardown complete.")
