"""
Output vocabulary of the translator.

The UML namespace carries the terms that have no OWL/RDFS counterpart:
stereotype markers, the Package and Stereotype classes of individuals, and
the debug annotation that records an element's original XMI identifier.
"""

from rdflib import Namespace, RDF, RDFS, URIRef

from constants import NamespaceConfig

UML = Namespace(NamespaceConfig.UML_NS)

UML_ID: URIRef = UML["id"]
HAS_STEREOTYPE: URIRef = UML["hasStereotype"]
ATTRIBUTE: URIRef = UML["attribute"]
PACKAGE: URIRef = UML["Package"]
STEREOTYPE: URIRef = UML["Stereotype"]

LABEL: URIRef = RDFS.label
TYPE: URIRef = RDF.type

__all__ = [
    'UML',
    'UML_ID',
    'HAS_STEREOTYPE',
    'ATTRIBUTE',
    'PACKAGE',
    'STEREOTYPE',
    'LABEL',
    'TYPE',
]
