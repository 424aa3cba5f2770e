"""Integration tests for XMI element translation.

A minimal driving pass feeds elements in document order and dispatches on
the element classifier, the way the host translator does.
"""

import pytest
from rdflib import OWL, RDF

from formats.xmi import PACKAGE, STEREOTYPE, UML_ID, Side
from shared.models import NodeKind

from fixtures import element


def translate(factory, elements):
    """Dispatch each element to its constructor; references have no guard."""
    for el in elements:
        if factory.matches(el, "Class"):
            factory.create_class(el)
        elif factory.matches(el, "Package"):
            factory.create_package(el)
        elif factory.matches(el, "DataType"):
            factory.create_datatype(el)
        elif factory.matches(el, "Attribute"):
            factory.create_attribute_property(el)
        elif el.matches("Stereotype"):
            factory.create_stereotype(el)
        elif el.matches("Classifier"):
            factory.find_class(el)
        elif el.matches("AssociationEnd"):
            factory.create_object_property(el)


@pytest.mark.integration
class TestTranslationScenario:
    """Test end-to-end translation of element sequences."""

    def test_breaker_scenario(self, factory, store):
        factory.create_class(element("Class", xmi_id="C1", name="Breaker"))
        ref = factory.find_class(element("Classifier", xmi_idref="C1"))
        prop = factory.create_object_property(element("AssociationEnd", xmi_id="P1", name="connectsTo"))
        end_a = factory.create_association_end(element("AssociationEnd"), "A1", Side.A)
        end_b = factory.create_association_end(element("AssociationEnd"), "A1", Side.B)

        assert len(store) == 4
        assert ref.kind is NodeKind.CLASS
        assert store.label(ref, "en") == "Breaker"
        assert len(store.nodes_of_kind(NodeKind.CLASS)) == 1
        assert store.label(prop, "en") == "connectsTo"
        assert {end_a.address, end_b.address} == {
            factory.scheme.address("A1-A"),
            factory.scheme.address("A1-B"),
        }
        assert store.summary() == {"class": 1, "object_property": 3}

    def test_forward_references_converge(self, factory, store):
        translate(factory, [
            element("Classifier", xmi_idref="C2"),
            element("Stereotype", xmi_idref="S1"),
            element("Package", xmi_id="PK1", name="Wires"),
            element("Class", xmi_id="C2", name="Conductor"),
            element("Stereotype", xmi_id="S1", name="enumeration"),
            element("Attribute", xmi_id="AT1", name="length"),
        ])

        conductor = store.get(factory.scheme.address("C2"))
        stereotype = store.get(factory.scheme.address("S1"))
        package = store.get(factory.scheme.address("PK1"))

        assert len(store) == 4
        assert store.label(conductor, "en") == "Conductor"
        assert (conductor.address, RDF.type, OWL.Class) in store.graph
        assert stereotype.individual_type == STEREOTYPE
        assert store.label(stereotype, "en") == "enumeration"
        assert package.individual_type == PACKAGE

    def test_incomplete_elements_are_skipped(self, factory, store):
        translate(factory, [
            element("Class", xmi_id="C1"),
            element("Class", name="Nameless"),
            element("Class", xmi_id="C3", name="Switch"),
        ])

        assert len(store) == 1
        assert store.get(factory.scheme.address("C1")) is None

    def test_graph_is_address_consistent(self, factory, store):
        translate(factory, [
            element("Class", xmi_id="C1", name="Breaker"),
            element("Classifier", xmi_idref="C1"),
            element("AssociationEnd", xmi_id="P1", name="connectsTo"),
            element("DataType", xmi_id="D1", name="Float"),
        ])

        subjects = set(store.graph.subjects())
        assert subjects == {node.address for node in store}
        for node in store:
            assert len(list(store.graph.objects(node.address, UML_ID))) == 1

    def test_serializes_for_downstream_consumers(self, factory, store):
        translate(factory, [element("Class", xmi_id="C1", name="Breaker")])

        turtle = store.graph.serialize(format="turtle")

        assert "xmi:C1" in turtle
        assert '"Breaker"@en' in turtle
