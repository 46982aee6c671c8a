"""Alternate type rules.

A rule says "document ``alternate`` wherever ``original`` appears". Rules are
kept in an ordered list and the first one that applies wins.
"""

import logging

from pydantic import BaseModel, ConfigDict

from route_docs.schema.types import ResolvedType

logger = logging.getLogger(__name__)


class AlternateTypeRule(BaseModel):
    """Substitute ``alternate`` for ``original`` during type resolution."""

    model_config = ConfigDict(frozen=True)

    original: ResolvedType
    alternate: ResolvedType

    def applies_to(self, resolved: ResolvedType) -> bool:
        if self.original.has_wildcards():
            return _wildcard_match(self.original, resolved)
        return self.original == resolved

    def alternate_for(self, resolved: ResolvedType) -> ResolvedType:
        """Return the substituted type, or ``resolved`` when the rule does not apply."""
        if not self.applies_to(resolved):
            return resolved
        if not self.alternate.has_wildcards():
            return self.alternate

        replacements = iter(_collect_replaceables(self.original, resolved))
        return _replace_wildcards(self.alternate, replacements)

    def __str__(self) -> str:
        return f"{self.original} -> {self.alternate}"


def new_rule(original: ResolvedType, alternate: ResolvedType) -> AlternateTypeRule:
    return AlternateTypeRule(original=original, alternate=alternate)


def alternate_type_for(rules: list[AlternateTypeRule], resolved: ResolvedType) -> ResolvedType:
    """Apply the first rule in ``rules`` that matches ``resolved``."""
    for index, rule in enumerate(rules):
        if rule.applies_to(resolved):
            logger.debug("Rule %d (%s) matched %s", index + 1, rule, resolved)
            return rule.alternate_for(resolved)
    return resolved


def _wildcard_match(pattern: ResolvedType, resolved: ResolvedType) -> bool:
    if pattern.is_wildcard():
        return True
    if pattern.erased_type is not resolved.erased_type:
        return False
    if len(pattern.type_parameters) != len(resolved.type_parameters):
        return False
    return all(
        _wildcard_match(p, r) for p, r in zip(pattern.type_parameters, resolved.type_parameters)
    )


def _collect_replaceables(pattern: ResolvedType, resolved: ResolvedType) -> list[ResolvedType]:
    """Types found in ``resolved`` at the wildcard positions of ``pattern``, in order."""
    if pattern.is_wildcard():
        return [resolved]
    found = []
    for p, r in zip(pattern.type_parameters, resolved.type_parameters):
        found.extend(_collect_replaceables(p, r))
    return found


def _replace_wildcards(template: ResolvedType, replacements) -> ResolvedType:
    if template.is_wildcard():
        return next(replacements)
    if not template.type_parameters:
        return template
    params = tuple(_replace_wildcards(p, replacements) for p in template.type_parameters)
    return ResolvedType(erased_type=template.erased_type, type_parameters=params)
