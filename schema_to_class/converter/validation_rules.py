"""
Validation rules read from a field's documentation.

The documentation is free text. Whitespace-separated tokens that match a
rule in the tables below become validation annotations:

    token := keyword | key ':' value (',' value)*

Bare keywords (``isEmail``) take no parameters; parametrized keys
(``minLength:3``, ``in:a,b,c``) carry their values as parameters. Any
other token is ordinary prose and is ignored. Adding a rule means adding
a table entry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..exceptions import DocumentationSyntaxError
from ..ir.nodes import Annotation, LiteralParam
from ..schema.nodes import Field

VALIDATION_ORIGIN = "class-validator"


@dataclass(frozen=True)
class RuleToken:
    """A documentation token split into key and raw value."""

    raw: str
    key: str
    value: str | None = None  # None for bare keywords


class ValidationRule(ABC):
    """Base class for all documentation rules"""

    def __init__(self, key: str, annotation_name: str):
        """
        Args:
            key: Keyword or parameter key as written in the documentation
            annotation_name: Name of the annotation the rule produces
        """
        self.key = key
        self.annotation_name = annotation_name

    def annotation(self, params: list[str] | None = None) -> Annotation:
        return Annotation(
            name=self.annotation_name,
            origin=VALIDATION_ORIGIN,
            params=[LiteralParam(p) for p in params or []],
        )

    @abstractmethod
    def build(self, token: RuleToken) -> Annotation:
        """Build the annotation for a token whose key matched this rule."""
        pass


class KeywordRule(ValidationRule):
    """A bare keyword without parameters, e.g. ``isEmail``"""

    def build(self, token: RuleToken) -> Annotation:
        return self.annotation()


class ParameterRule(ValidationRule):
    """A ``key:value`` rule with a single parameter, e.g. ``minLength:3``"""

    def parse_values(self, token: RuleToken) -> list[str]:
        if not token.value:
            raise DocumentationSyntaxError(token.raw, f"missing value for '{self.key}'")
        return [token.value]

    def build(self, token: RuleToken) -> Annotation:
        return self.annotation(self.parse_values(token))


class ListParameterRule(ParameterRule):
    """A ``key:a,b,c`` rule whose values become separate parameters"""

    def parse_values(self, token: RuleToken) -> list[str]:
        values = super().parse_values(token)[0].split(",")
        if any(not v for v in values):
            raise DocumentationSyntaxError(token.raw, f"empty value in list for '{self.key}'")
        return values


KEYWORD_RULES: dict[str, ValidationRule] = {
    rule.key: rule
    for rule in (
        KeywordRule("isEmail", "IsEmail"),
        KeywordRule("isUrl", "IsUrl"),
        KeywordRule("isAlpha", "IsAlpha"),
        KeywordRule("isAlphanumeric", "IsAlphanumeric"),
        KeywordRule("isAscii", "IsAscii"),
        KeywordRule("isBase64", "IsBase64"),
        KeywordRule("isCreditCard", "IsCreditCard"),
        KeywordRule("isCurrency", "IsCurrency"),
        KeywordRule("isDecimal", "IsDecimal"),
        KeywordRule("isFQDN", "IsFQDN"),
        KeywordRule("isHash", "IsHash"),
        KeywordRule("isHexColor", "IsHexColor"),
        KeywordRule("isHexadecimal", "IsHexadecimal"),
        KeywordRule("isIP", "IsIP"),
        KeywordRule("isISBN", "IsISBN"),
        KeywordRule("isISIN", "IsISIN"),
        KeywordRule("isISO8601", "IsISO8601"),
        KeywordRule("isJWT", "IsJWT"),
        KeywordRule("isLatLong", "IsLatLong"),
    )
}

PARAMETER_RULES: dict[str, ValidationRule] = {
    rule.key: rule
    for rule in (
        ParameterRule("minLength", "MinLength"),
        ParameterRule("maxLength", "MaxLength"),
        ParameterRule("min", "Min"),
        ParameterRule("max", "Max"),
        ListParameterRule("in", "IsIn"),
        ParameterRule("isDivisibleBy", "IsDivisibleBy"),
    )
}

# Declared scalar type -> basic type check, used only when the field has no documentation at all
TYPE_FALLBACK_RULES: dict[str, str] = {
    "String": "IsString",
    "Int": "IsInt",
    "Boolean": "IsBoolean",
    "BigInt": "IsInt",
    "DateTime": "IsDate",
}

OPTIONAL_ANNOTATION = "IsOptional"


def tokenize_documentation(documentation: str | None) -> list[str]:
    if not documentation:
        return []
    return documentation.split()


def parse_token(raw: str) -> RuleToken:
    key, sep, value = raw.partition(":")
    if not sep:
        return RuleToken(raw=raw, key=raw)
    return RuleToken(raw=raw, key=key, value=value)


def match_rule(token: RuleToken) -> ValidationRule | None:
    if token.value is None:
        return KEYWORD_RULES.get(token.key)
    return PARAMETER_RULES.get(token.key)


def extract_documentation_rules(documentation: str | None) -> list[Annotation]:
    """
    Parse documentation text into validation annotations, in token order.

    A rule is applied once; later tokens for the same rule are ignored.
    """
    annotations = []
    applied: set[str] = set()
    for raw in tokenize_documentation(documentation):
        token = parse_token(raw)
        rule = match_rule(token)
        if rule is None or rule.key in applied:
            continue
        annotations.append(rule.build(token))
        applied.add(rule.key)
    return annotations


def extract_validation_annotations(field: Field) -> list[Annotation]:
    """
    Derive the validation annotations of a field.

    Optional fields always start with IsOptional. Documented fields get
    their documentation rules; undocumented fields get a single basic
    type check keyed on the declared scalar type, if there is one.
    """
    annotations = []
    if not field.is_required:
        annotations.append(Annotation(name=OPTIONAL_ANNOTATION, origin=VALIDATION_ORIGIN))

    try:
        if tokenize_documentation(field.documentation):
            annotations.extend(extract_documentation_rules(field.documentation))
        elif field.type in TYPE_FALLBACK_RULES:
            annotations.append(Annotation(name=TYPE_FALLBACK_RULES[field.type], origin=VALIDATION_ORIGIN))
    except DocumentationSyntaxError as e:
        raise e.with_field(field.name)

    return annotations
