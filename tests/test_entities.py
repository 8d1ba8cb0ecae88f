# -*- encoding: utf-8 -*-
"""
Tests for credential model entities.

Tests construction checks, acyclicity of every self-referential relation
and the whole-graph validation pass.
"""

from datetime import date, datetime, timezone

import pytest

from europass_credential.errors import (
    InvalidIdentifierError,
    InvalidValueError,
    NumericRangeError,
    StructuralCycleError,
    UnknownCodeError,
)
from europass_credential.model import (
    Acceptor,
    Accreditation,
    AssessmentSpecification,
    Attachment,
    AwardingProcess,
    Code,
    ContactPoint,
    Credential,
    EntitlementSpecification,
    Identifier,
    LearningActivitySpecification,
    LearningSpecification,
    Measure,
    Organisation,
    OrganisationShare,
    Person,
    Proof,
    Qualification,
    Text,
    VerificationCheck,
    iter_entities,
    validate_graph,
)


def org(id, **kwargs):
    return Organisation(id=id, preferred_name=Text(id.rsplit(":", 1)[-1]), **kwargs)


def titled(cls, id, **kwargs):
    return cls(id=id, title=Text(id.rsplit(":", 1)[-1]), **kwargs)


@pytest.fixture
def issuer():
    return org("urn:test:org:uni")


@pytest.fixture
def subject():
    return Person(
        id="urn:test:person:1",
        given_names="Maija",
        family_name="Meikäläinen",
        identifier=(Identifier(content="1", scheme_id="urn:test:person"),),
    )


@pytest.fixture
def make_credential(issuer, subject):
    def make(id, **kwargs):
        return Credential(
            id=id,
            credential_type=Code.resolve("credential-type", "generic"),
            title=Text("Course"),
            issuer=issuer,
            subject=subject,
            issuance_date=date(2019, 1, 1),
            valid_from=date(2019, 1, 1),
            **kwargs,
        )
    return make


class TestOrganisation:
    """Tests for organisation units."""

    def test_units(self):
        """Test an organisation with nested units."""
        faculty = org("urn:test:org:faculty", has_unit=(org("urn:test:org:dept"),))
        uni = org("urn:test:org:uni", has_unit=[faculty])
        assert isinstance(uni.has_unit, tuple)
        assert uni.has_unit[0].has_unit[0].id == "urn:test:org:dept"

    def test_has_unit_cycle(self):
        """Test a unit chain reaching its own root is rejected."""
        inner = org("urn:test:org:b", has_unit=(org("urn:test:org:a"),))
        with pytest.raises(StructuralCycleError) as exc_info:
            org("urn:test:org:a", has_unit=(inner,))
        assert exc_info.value.relation == "has_unit"

    def test_self_unit(self):
        """Test an organisation cannot be its own unit."""
        with pytest.raises(StructuralCycleError):
            org("urn:test:org:a", has_unit=(org("urn:test:org:a"),))

    def test_unit_of_cycle(self):
        """Test the parent chain is checked independently."""
        top = org("urn:test:org:a")
        middle = org("urn:test:org:b", unit_of=top)
        with pytest.raises(StructuralCycleError) as exc_info:
            org("urn:test:org:a", unit_of=middle)
        assert exc_info.value.relation == "unit_of"

    def test_shared_unit_allowed(self):
        """Test has_unit is not exclusive."""
        dept = org("urn:test:org:dept")
        uni = org("urn:test:org:uni", has_unit=(org("urn:test:org:f1", has_unit=(dept,)),
                                                 org("urn:test:org:f2", has_unit=(dept,))))
        assert len(uni.has_unit) == 2

    def test_deep_hierarchy(self):
        """Test depth beyond the recursion limit is checked without recursion."""
        node = org("urn:test:org:0")
        for depth in range(1, 1500):
            node = org(f"urn:test:org:{depth}", has_unit=(node,))
        with pytest.raises(StructuralCycleError):
            org("urn:test:org:0", has_unit=(node,))

    def test_id_must_be_uri(self):
        """Test entity ids are absolute URIs."""
        with pytest.raises(InvalidValueError):
            org("not a uri")

    def test_wrong_child_type(self):
        """Test units must be organisations."""
        with pytest.raises(InvalidValueError):
            Organisation(
                id="urn:test:org:a",
                preferred_name=Text("A"),
                has_unit=(Person(id="urn:test:person:1", given_names="A", family_name="B"),),
            )

    def test_institution_code_domain(self):
        """Test the institution field takes only institution Codes."""
        with pytest.raises(UnknownCodeError):
            org("urn:test:org:a", educational_institution=Code.resolve("eqf-level", "6"))

    def test_contact_point(self):
        """Test contact points take channel Codes."""
        contact = ContactPoint(
            channel=Code.resolve("communication-channel", "email"),
            address="registry@example.fi",
            usage=Code.resolve("communication-channel-usage", "business"),
        )
        assert org("urn:test:org:a", contact_point=(contact,)).contact_point[0] == contact

    def test_accreditation(self):
        """Test an accredited organisation."""
        accreditation = Accreditation(
            id="urn:test:accreditation:1",
            accreditation_type=Code.resolve("accreditation-type", "institutional-quality-assurance"),
            title=Text("Audit"),
            issued_date=date(2020, 1, 1),
            expiry_date=date(2026, 1, 1),
        )
        assert org("urn:test:org:a", has_accreditation=(accreditation,)).has_accreditation

    def test_accreditation_period(self):
        """Test expiry before issue is rejected."""
        with pytest.raises(InvalidValueError):
            Accreditation(
                id="urn:test:accreditation:1",
                accreditation_type=Code.resolve("accreditation-type", "program-license"),
                title=Text("Licence"),
                issued_date=date(2020, 1, 1),
                expiry_date=date(2019, 1, 1),
            )


class TestSpecifications:
    """Tests for has_part and specialisation_of on every specification kind."""

    KINDS = [
        LearningSpecification,
        LearningActivitySpecification,
        AssessmentSpecification,
        Qualification,
    ]

    @pytest.mark.parametrize("cls", KINDS)
    @pytest.mark.parametrize("relation", ["has_part", "specialisation_of"])
    def test_cycle_rejected(self, cls, relation):
        """Test both relations reject cycles."""
        leaf = titled(cls, "urn:test:ls:a")
        middle = titled(cls, "urn:test:ls:b", **{relation: (leaf,)})
        with pytest.raises(StructuralCycleError) as exc_info:
            titled(cls, "urn:test:ls:a", **{relation: (middle,)})
        assert exc_info.value.relation == relation

    @pytest.mark.parametrize("cls", KINDS)
    def test_relations_independent(self, cls):
        """Test a node may be both part and specialisation of the same node."""
        base = titled(cls, "urn:test:ls:base")
        node = titled(cls, "urn:test:ls:node", has_part=(base,), specialisation_of=(base,))
        assert node.has_part == node.specialisation_of

    def test_entitlement_specification_cycle(self):
        """Test entitlement specifications reject cycles."""
        def make(id, **kwargs):
            return EntitlementSpecification(
                id=id,
                title=Text("Right"),
                entitlement_type=Code.resolve("entitlement-type", "learning-opportunity"),
                status=Code.resolve("entitlement-status", "actual"),
                **kwargs,
            )
        with pytest.raises(StructuralCycleError):
            make("urn:test:ent:a", has_part=(make("urn:test:ent:b", has_part=(make("urn:test:ent:a"),)),))

    def test_learning_specification_codes(self):
        """Test coded fields take their own domain."""
        specification = titled(
            LearningSpecification,
            "urn:test:ls:a",
            learning_opportunity_type=(Code.resolve("learning-opportunity-type", "course"),),
            language=(Code.resolve("language", "fi"),),
            ects_credit_points=5,
            volume_of_learning=Measure.create(135, "HUR"),
        )
        assert specification.ects_credit_points == 5
        with pytest.raises(UnknownCodeError):
            titled(LearningSpecification, "urn:test:ls:b",
                 learning_opportunity_type=(Code.resolve("learning-activity-type", "internship"),))

    def test_negative_credits(self):
        """Test negative ECTS credits are rejected."""
        with pytest.raises(NumericRangeError):
            titled(LearningSpecification, "urn:test:ls:a", ects_credit_points=-5)

    def test_volume_must_be_duration(self):
        """Test volume of learning is a duration."""
        with pytest.raises(InvalidValueError):
            titled(LearningSpecification, "urn:test:ls:a", volume_of_learning=Measure.create(5, "KGM"))

    def test_qualification_levels(self):
        """Test a qualification placed in EQF and the Finnish NQF."""
        qualification = titled(
            Qualification,
            "urn:test:qual:1",
            eqf_level=Code.resolve("eqf-level", "7"),
            nqf_level=(Code.resolve("nqf-level-fi", "7"),),
        )
        assert qualification.eqf_level.notation == "7"
        with pytest.raises(UnknownCodeError):
            titled(Qualification, "urn:test:qual:2", eqf_level=Code.resolve("nqf-level-fi", "7"))


class TestSmallRecords:
    """Tests for records owned by entities."""

    def test_share_range(self):
        """Test shares lie in (0, 1]."""
        role = Code.resolve("organisation-role", "urn:code:organisation-role:responsible-organisation")
        assert OrganisationShare(organisation_id="urn:test:org:a", role=role, share=1.0).share == 1.0
        for share in (0, 1.5, -0.5):
            with pytest.raises(NumericRangeError):
                OrganisationShare(organisation_id="urn:test:org:a", role=role, share=share)

    def test_acceptor_role_domain(self):
        """Test acceptors take role Codes."""
        with pytest.raises(UnknownCodeError):
            Acceptor(identifier=Identifier("p1"), role=Code.resolve("document-state", "DRAFT"))

    def test_awarding_needs_body(self):
        """Test an awarding process names an awarding body."""
        with pytest.raises(InvalidValueError):
            AwardingProcess(id="urn:test:awarding:1")

    def test_proof(self):
        """Test a proof needs its fields."""
        with pytest.raises(InvalidValueError):
            Proof(proof_type="", created=datetime.now(timezone.utc), verification_method="urn:k", value="x")


class TestCredential:
    """Tests for the credential root."""

    def test_contains_cycle(self, make_credential):
        """Test a credential cannot contain itself transitively."""
        inner = make_credential("urn:test:cred:b", contains=(make_credential("urn:test:cred:a"),))
        with pytest.raises(StructuralCycleError) as exc_info:
            make_credential("urn:test:cred:a", contains=(inner,))
        assert exc_info.value.relation == "contains"

    def test_contains_exclusive(self, make_credential):
        """Test one credential cannot be contained twice."""
        shared = make_credential("urn:test:cred:shared")
        with pytest.raises(StructuralCycleError):
            make_credential("urn:test:cred:root", contains=(shared, shared))
        with pytest.raises(StructuralCycleError):
            make_credential("urn:test:cred:root", contains=(
                make_credential("urn:test:cred:x", contains=(shared,)),
                make_credential("urn:test:cred:y", contains=(shared,)),
            ))

    def test_micro_credentials(self, make_credential):
        """Test composition of distinct sub-credentials."""
        root = make_credential("urn:test:cred:root", contains=[
            make_credential("urn:test:cred:1"),
            make_credential("urn:test:cred:2"),
        ])
        assert [c.id for c in root.contains] == ["urn:test:cred:1", "urn:test:cred:2"]

    def test_missing_required(self, issuer, subject):
        """Test required fields."""
        with pytest.raises(InvalidValueError, match="issuance_date"):
            Credential(
                id="urn:test:cred:1",
                credential_type=Code.resolve("credential-type", "generic"),
                title=Text("Course"),
                issuer=issuer,
                subject=subject,
                valid_from=date(2019, 1, 1),
            )

    def test_expiry_before_validity(self, make_credential):
        """Test expiration before valid_from is rejected."""
        with pytest.raises(InvalidValueError):
            make_credential("urn:test:cred:1", expiration_date=date(2018, 1, 1))

    def test_document_state_domain(self, make_credential):
        """Test document_state takes a document-state Code."""
        with pytest.raises(UnknownCodeError):
            make_credential("urn:test:cred:1", document_state=Code.resolve("attainment-state", "ATTAINED"))

    def test_frozen(self, make_credential):
        """Test entities have no setters."""
        credential = make_credential("urn:test:cred:1")
        with pytest.raises(AttributeError):
            credential.title = Text("Other")

    def test_with_proof(self, make_credential):
        """Test sealing returns a new credential."""
        credential = make_credential("urn:test:cred:1")
        proof = Proof(
            proof_type="Ed25519Signature2020",
            created=datetime(2024, 1, 1, tzinfo=timezone.utc),
            verification_method="urn:test:key:1",
            value="z3FXQ",
        )
        sealed = credential.with_proof(proof)
        assert sealed.proof is proof
        assert credential.proof is None

    def test_attachment_and_checks(self, make_credential):
        """Test attachments and verification checks."""
        attachment = Attachment(
            id="urn:test:att:1",
            content="JVBERi0xLjQ=",
            content_type=Code.resolve("attachment-type", "application/pdf"),
            content_encoding=Code.resolve("content-encoding", "base64"),
        )
        check = VerificationCheck(
            id="urn:test:check:1",
            verification_type=Code.resolve("verification-type", "seal"),
            status=Code.resolve("verification-status", "green"),
            subject_id="urn:test:cred:1",
        )
        credential = make_credential("urn:test:cred:1", attachment=attachment, verification_checks=(check,))
        validate_graph(credential)


class TestValidateGraph:
    """Tests for the whole-graph validation pass."""

    def test_valid_graph(self, make_credential):
        """Test a consistent graph passes."""
        root = make_credential("urn:test:cred:root", contains=(make_credential("urn:test:cred:1"),))
        validate_graph(root)
        ids = {entity.id for entity in iter_entities(root)}
        assert {"urn:test:cred:root", "urn:test:cred:1", "urn:test:org:uni", "urn:test:person:1"} <= ids

    def test_identifier_conflict(self, make_credential, issuer):
        """Test one identifier on two different people is a conflict."""
        other = Person(
            id="urn:test:person:2",
            given_names="Matti",
            family_name="Virtanen",
            identifier=(Identifier(content="1", scheme_id="urn:test:person"),),
        )
        root = make_credential("urn:test:cred:root", contains=(
            Credential(
                id="urn:test:cred:1",
                credential_type=Code.resolve("credential-type", "generic"),
                title=Text("Course"),
                issuer=issuer,
                subject=other,
                issuance_date=date(2019, 1, 1),
                valid_from=date(2019, 1, 1),
            ),
        ))
        with pytest.raises(InvalidIdentifierError):
            validate_graph(root)

    def test_same_content_other_scheme(self, make_credential, issuer):
        """Test equal content under another scheme is no conflict."""
        other = Person(
            id="urn:test:person:2",
            given_names="Matti",
            family_name="Virtanen",
            identifier=(Identifier(content="1", scheme_id="urn:test:student-number"),),
        )
        root = make_credential("urn:test:cred:root", contains=(
            Credential(
                id="urn:test:cred:1",
                credential_type=Code.resolve("credential-type", "generic"),
                title=Text("Course"),
                issuer=issuer,
                subject=other,
                issuance_date=date(2019, 1, 1),
                valid_from=date(2019, 1, 1),
            ),
        ))
        validate_graph(root)

    def test_deep_graph(self, make_credential):
        """Test a deep unit tree is walked without recursion."""
        node = org("urn:test:org:0")
        for depth in range(1, 1500):
            node = org(f"urn:test:org:{depth}", has_unit=(node,))
        credential = Credential(
            id="urn:test:cred:deep",
            credential_type=Code.resolve("credential-type", "generic"),
            title=Text("Course"),
            issuer=node,
            subject=Person(id="urn:test:person:9", given_names="A", family_name="B"),
            issuance_date=date(2019, 1, 1),
            valid_from=date(2019, 1, 1),
        )
        validate_graph(credential)
