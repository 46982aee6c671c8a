import pytest

from route_docs.entities import HttpEntity, ResponseEntity
from route_docs.schema.rules import alternate_type_for, new_rule
from route_docs.schema.types import TypeResolver, WildcardType


class Pet:
    pass


@pytest.fixture
def resolver():
    return TypeResolver()


class TestAlternateTypeRule:
    def test_exact_rule_applies_only_to_exact_type(self, resolver):
        rule = new_rule(resolver.resolve(dict, str, str), resolver.resolve(object))
        assert rule.applies_to(resolver.resolve(dict[str, str]))
        assert not rule.applies_to(resolver.resolve(dict[str, int]))
        assert not rule.applies_to(resolver.resolve(dict))

    def test_exact_rule_substitutes_alternate(self, resolver):
        rule = new_rule(resolver.resolve(dict), resolver.resolve(object))
        assert rule.alternate_for(resolver.resolve(dict)) == resolver.resolve(object)

    def test_non_matching_type_is_returned_unchanged(self, resolver):
        rule = new_rule(resolver.resolve(dict), resolver.resolve(object))
        pet = resolver.resolve(Pet)
        assert rule.alternate_for(pet) is pet

    def test_wildcard_unwraps_payload(self, resolver):
        rule = new_rule(resolver.resolve(ResponseEntity, WildcardType), resolver.resolve(WildcardType))
        assert rule.alternate_for(resolver.resolve(ResponseEntity[Pet])) == resolver.resolve(Pet)

    def test_wildcard_requires_same_container(self, resolver):
        rule = new_rule(resolver.resolve(ResponseEntity, WildcardType), resolver.resolve(WildcardType))
        assert not rule.applies_to(resolver.resolve(HttpEntity[Pet]))
        assert not rule.applies_to(resolver.resolve(ResponseEntity))

    def test_wildcard_substituted_inside_alternate(self, resolver):
        rule = new_rule(resolver.resolve(HttpEntity, WildcardType), resolver.resolve(list, WildcardType))
        assert rule.alternate_for(resolver.resolve(HttpEntity[Pet])) == resolver.resolve(list[Pet])

    def test_str(self, resolver):
        rule = new_rule(resolver.resolve(dict, str, object), resolver.resolve(object))
        assert str(rule) == "dict[str, object] -> object"


class TestAlternateTypeFor:
    def test_first_matching_rule_wins(self, resolver):
        rules = [
            new_rule(resolver.resolve(HttpEntity, WildcardType), resolver.resolve(WildcardType)),
            new_rule(resolver.resolve(HttpEntity, Pet), resolver.resolve(str)),
        ]
        assert alternate_type_for(rules, resolver.resolve(HttpEntity[Pet])) == resolver.resolve(Pet)

    def test_no_rule_matches(self, resolver):
        rules = [new_rule(resolver.resolve(dict), resolver.resolve(object))]
        pet = resolver.resolve(Pet)
        assert alternate_type_for(rules, pet) is pet

    def test_empty_rules(self, resolver):
        pet = resolver.resolve(Pet)
        assert alternate_type_for([], pet) is pet
