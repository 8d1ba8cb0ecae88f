# -*- encoding: utf-8 -*-
"""
Tests for the vocabulary registry.

Tests exact code validation, crosswalks and the bundled tables.
"""

import pytest

from europass_credential.errors import UnknownCodeError
from europass_credential.vocabularies import (
    DEFAULT_REGISTRY,
    EQF_DESCRIPTORS,
    Vocabulary,
    VocabularyDomain,
    VocabularyRegistry,
    build_default_registry,
)
from europass_credential.vocabularies.named_authority_lists import (
    CURRENCIES,
    EU_LANGUAGES,
    MEASUREMENT_UNITS,
)


@pytest.fixture
def small_registry():
    """Registry with one source table crosswalked to one target table."""
    target = Vocabulary.from_table(
        domain="colour",
        name="Colours",
        framework_uri="urn:test:colour",
        version="1",
        rows=[("red", "Red"), ("blue", "Blue")],
        uri_base="urn:test:colour:",
    )
    source = Vocabulary.from_table(
        domain="shade",
        name="Shades",
        framework_uri="urn:test:shade",
        version="1",
        rows=[("crimson", "Crimson", "", "red"), ("grey", "Grey")],
        maps_to_domain="colour",
    )
    return VocabularyRegistry([target, source])


class TestValidate:
    """Tests for exact code validation."""

    def test_eur_resolves_to_euro(self):
        """Test EUR resolves to the Euro term."""
        term = DEFAULT_REGISTRY.validate(VocabularyDomain.CURRENCY, "EUR")
        assert term.label == "Euro"
        assert term.notation == "EUR"
        assert term.uri == "http://publications.europa.eu/resource/authority/currency/EUR"

    def test_unknown_currency_rejected(self):
        """Test a code absent from the table is rejected."""
        with pytest.raises(UnknownCodeError) as exc_info:
            DEFAULT_REGISTRY.validate(VocabularyDomain.CURRENCY, "XYZ")
        assert exc_info.value.domain == "currency"
        assert exc_info.value.value == "XYZ"

    def test_matching_is_case_sensitive(self):
        """Test lowercase eur is not EUR."""
        with pytest.raises(UnknownCodeError, match="eur"):
            DEFAULT_REGISTRY.validate("currency", "eur")

    def test_no_trimming(self):
        """Test surrounding whitespace is not stripped."""
        assert not DEFAULT_REGISTRY.is_valid(VocabularyDomain.CURRENCY, " EUR")

    @pytest.mark.parametrize("notation,label", CURRENCIES)
    def test_every_currency_validates(self, notation, label):
        """Test every currency row resolves to its own label."""
        assert DEFAULT_REGISTRY.validate(VocabularyDomain.CURRENCY, notation).label == label

    @pytest.mark.parametrize("notation,label", MEASUREMENT_UNITS)
    def test_every_unit_validates(self, notation, label):
        """Test every measurement unit row resolves to its own label."""
        assert DEFAULT_REGISTRY.validate(VocabularyDomain.MEASUREMENT_UNIT, notation).label == label

    def test_unknown_domain(self):
        """Test an unregistered domain fails like an unknown code."""
        with pytest.raises(UnknownCodeError) as exc_info:
            DEFAULT_REGISTRY.validate("planet", "EUR")
        assert exc_info.value.domain == "planet"

    def test_non_string_code(self):
        """Test non-string codes never match."""
        assert not DEFAULT_REGISTRY.is_valid(VocabularyDomain.EQF_LEVEL, 6)

    def test_role_urn(self):
        """Test SISU acceptor roles are matched by full URN."""
        term = DEFAULT_REGISTRY.validate(
            VocabularyDomain.ROLE, "urn:code:attainment-acceptor-type:approved-by",
        )
        assert term.label == "Approved by"
        assert not DEFAULT_REGISTRY.is_valid(VocabularyDomain.ROLE, "approved-by")


class TestTables:
    """Tests for the bundled tables."""

    def test_all_domains_registered(self):
        """Test every declared domain has a vocabulary."""
        for domain in VocabularyDomain:
            assert domain in DEFAULT_REGISTRY

    def test_domains_sorted(self):
        """Test domains() lists names in order."""
        domains = DEFAULT_REGISTRY.domains()
        assert domains == sorted(domains)
        assert "currency" in domains

    def test_twenty_four_eu_languages(self):
        """Test the language table holds the EU official languages."""
        languages = DEFAULT_REGISTRY.vocabulary(VocabularyDomain.LANGUAGE)
        assert len(languages) == 24 == len(EU_LANGUAGES)
        assert DEFAULT_REGISTRY.validate("language", "fi").uri.endswith("/language/FIN")

    def test_eqf_levels(self):
        """Test EQF levels 1 to 8 with their descriptors."""
        eqf = DEFAULT_REGISTRY.vocabulary(VocabularyDomain.EQF_LEVEL)
        assert sorted(term.notation for term in eqf) == [str(n) for n in range(1, 9)]
        assert EQF_DESCRIPTORS[1].knowledge == "Basic general knowledge"
        assert not DEFAULT_REGISTRY.is_valid(VocabularyDomain.EQF_LEVEL, "9")

    def test_finnish_nqf_starts_at_level_two(self):
        """Test the Finnish framework has no level 1."""
        assert not DEFAULT_REGISTRY.is_valid(VocabularyDomain.NQF_LEVEL_FI, "1")
        assert DEFAULT_REGISTRY.is_valid(VocabularyDomain.NQF_LEVEL_FI, "8")

    def test_credential_types(self):
        """Test Europass credential type notations."""
        notations = {term.notation for term in DEFAULT_REGISTRY.vocabulary(VocabularyDomain.CREDENTIAL_TYPE)}
        assert notations == {
            "learning-activity",
            "qualification-award",
            "diploma-supplement",
            "learning-entitlement",
            "generic",
        }

    def test_vocabulary_is_read_only(self):
        """Test term tables cannot be modified."""
        currencies = DEFAULT_REGISTRY.vocabulary(VocabularyDomain.CURRENCY)
        with pytest.raises(TypeError):
            currencies.terms["ABC"] = currencies.terms["EUR"]

    def test_build_is_repeatable(self):
        """Test a fresh registry has the same domains."""
        assert build_default_registry().domains() == DEFAULT_REGISTRY.domains()


class TestCrosswalk:
    """Tests for crosswalk translation."""

    def test_attainment_type_to_learning_opportunity(self):
        """Test SISU attainment types translate to Europass opportunity types."""
        expected = {
            "CourseUnitAttainment": "course",
            "ModuleAttainment": "programme-module",
            "AssessmentItemAttainment": "course",
        }
        for source, target in expected.items():
            term = DEFAULT_REGISTRY.validate(VocabularyDomain.ATTAINMENT_TYPE, source)
            translated = DEFAULT_REGISTRY.translate(term)
            assert translated.domain == "learning-opportunity-type"
            assert translated.notation == target

    def test_language_urn_to_eu_language(self):
        """Test SISU language URNs translate to ISO 639-1 notations."""
        term = DEFAULT_REGISTRY.validate(VocabularyDomain.ATTAINMENT_LANGUAGE, "urn:code:language:fi")
        assert DEFAULT_REGISTRY.translate(term).notation == "fi"

    def test_nqf_to_eqf(self):
        """Test Finnish NQF levels translate to the same EQF level."""
        term = DEFAULT_REGISTRY.validate(VocabularyDomain.NQF_LEVEL_FI, "6")
        assert DEFAULT_REGISTRY.translate(term).domain == "eqf-level"
        assert DEFAULT_REGISTRY.translate(term).notation == "6"

    def test_term_without_target(self, small_registry):
        """Test translating a term without crosswalk fails."""
        grey = small_registry.validate("shade", "grey")
        with pytest.raises(UnknownCodeError):
            small_registry.translate(grey)

    def test_custom_registry(self, small_registry):
        """Test crosswalk in a hand-built registry."""
        crimson = small_registry.validate("shade", "crimson")
        red = small_registry.translate(crimson)
        assert red.label == "Red"
        assert red.uri == "urn:test:colour:red"


class TestRegistryConstruction:
    """Tests for table and registry construction errors."""

    def test_duplicate_notation(self):
        """Test a table with a repeated notation is rejected."""
        with pytest.raises(ValueError, match="Duplicate notation"):
            Vocabulary.from_table("x", "X", "urn:x", "1", [("a", "A"), ("a", "B")])

    def test_empty_notation(self):
        """Test a table with an empty notation is rejected."""
        with pytest.raises(ValueError, match="Empty notation"):
            Vocabulary.from_table("x", "X", "urn:x", "1", [("", "A")])

    def test_target_without_domain(self):
        """Test a crosswalk column needs a target domain."""
        with pytest.raises(ValueError, match="no target domain"):
            Vocabulary.from_table("x", "X", "urn:x", "1", [("a", "A", "", "b")])

    def test_dangling_crosswalk(self):
        """Test a crosswalk to a missing term is rejected."""
        source = Vocabulary.from_table("x", "X", "urn:x", "1", [("a", "A", "", "missing")], maps_to_domain="y")
        target = Vocabulary.from_table("y", "Y", "urn:y", "1", [("b", "B")])
        with pytest.raises(ValueError, match="unknown"):
            VocabularyRegistry([source, target])

    def test_duplicate_domain(self):
        """Test two vocabularies for one domain are rejected."""
        table = Vocabulary.from_table("x", "X", "urn:x", "1", [("a", "A")])
        with pytest.raises(ValueError, match="Duplicate vocabulary domain"):
            VocabularyRegistry([table, table])

    def test_unknown_vocabulary(self):
        """Test asking for an unregistered vocabulary."""
        with pytest.raises(UnknownCodeError):
            DEFAULT_REGISTRY.vocabulary("planet")
