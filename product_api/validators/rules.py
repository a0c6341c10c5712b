"""
Declarative request validation.

A rule pairs a field lookup with a predicate and a message. A chain is an
ordered list of rules; evaluating it runs every rule and collects one error
per failed rule, so a client sees all problems in a single response.

Predicates operate on the raw JSON value. Checks that are defined on text
(numeric, boolean, emptiness) look at the value rendered as a string:
missing and null become "", booleans become "true"/"false" and integral
numbers render without a fractional part.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

PARAMS = "params"
BODY = "body"

DEFAULT_MESSAGE = "Invalid value"

_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_BOOLEAN_STRINGS = frozenset(["true", "false", "1", "0"])

# Sentinel for fields absent from the request
MISSING = object()


def to_text(value: Any) -> str:
    """Render a raw JSON value the way text-based checks see it"""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def to_json_value(value: Any) -> Any:
    """Echo a raw value back in an error entry; non-finite numbers become null"""
    if value is MISSING:
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, list):
        return [to_json_value(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json_value(item) for key, item in value.items()}
    return value


def to_number(value: Any) -> float:
    """Numeric interpretation of a raw value; NaN when it has none"""
    if value is MISSING or value is None:
        return math.nan
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def is_numeric(value: Any) -> bool:
    return bool(_NUMERIC_RE.match(to_text(value)))


def is_int(value: Any) -> bool:
    return bool(_INT_RE.match(to_text(value)))


def not_empty(value: Any) -> bool:
    return to_text(value) != ""


def is_boolean(value: Any) -> bool:
    return to_text(value) in _BOOLEAN_STRINGS


def greater_than_zero(value: Any) -> bool:
    # NaN compares false, so non-numeric input fails
    if value is MISSING or value is None:
        return False
    return to_number(value) > 0


@dataclass
class RequestInput:
    """The parts of a request a validation chain can look at"""
    params: Dict[str, Any] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)

    def lookup(self, location: str, name: str) -> Any:
        source = self.params if location == PARAMS else self.body
        return source.get(name, MISSING)


@dataclass(frozen=True)
class Rule:
    """One predicate applied to one field"""
    location: str
    field: str
    predicate: Callable[[Any], bool]
    message: str = DEFAULT_MESSAGE

    def check(self, request_input: RequestInput) -> Optional[Dict[str, Any]]:
        """Return an error entry when the predicate fails, else None"""
        value = request_input.lookup(self.location, self.field)
        if self.predicate(value):
            return None
        return {
            "type": "field",
            "value": to_json_value(value),
            "msg": self.message,
            "path": self.field,
            "location": self.location,
        }


class FieldChain:
    """
    Builder for the rules of a single field.

    ``with_message`` relabels only the rule added just before it.
    """

    def __init__(self, location: str, name: str):
        self.location = location
        self.name = name
        self.rules: List[Rule] = []

    def _add(self, predicate: Callable[[Any], bool]) -> "FieldChain":
        self.rules.append(Rule(self.location, self.name, predicate))
        return self

    def is_numeric(self) -> "FieldChain":
        return self._add(is_numeric)

    def is_int(self) -> "FieldChain":
        return self._add(is_int)

    def not_empty(self) -> "FieldChain":
        return self._add(not_empty)

    def is_boolean(self) -> "FieldChain":
        return self._add(is_boolean)

    def custom(self, predicate: Callable[[Any], bool]) -> "FieldChain":
        return self._add(predicate)

    def with_message(self, message: str) -> "FieldChain":
        if not self.rules:
            raise ValueError("with_message() must follow a validator")
        last = self.rules[-1]
        self.rules[-1] = Rule(last.location, last.field, last.predicate, message)
        return self


def param(name: str) -> FieldChain:
    return FieldChain(PARAMS, name)


def body(name: str) -> FieldChain:
    return FieldChain(BODY, name)


def chain(*fields: FieldChain) -> List[Rule]:
    """Flatten field builders into one ordered rule list"""
    rules: List[Rule] = []
    for field_chain in fields:
        rules.extend(field_chain.rules)
    return rules


def validate(rules: Sequence[Rule], request_input: RequestInput) -> List[Dict[str, Any]]:
    """Run every rule and return the errors in rule order"""
    errors = []
    for rule in rules:
        error = rule.check(request_input)
        if error is not None:
            errors.append(error)
    return errors


def build_input(params: Mapping[str, Any], payload: Any) -> RequestInput:
    """Wrap path parameters and a parsed JSON payload; non-object payloads carry no fields"""
    return RequestInput(
        params=dict(params),
        body=dict(payload) if isinstance(payload, dict) else {},
    )
