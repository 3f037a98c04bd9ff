"""Bridge between schema.org property names and the GoodRelations vocabulary.

GoodRelations is the commerce vocabulary schema.org's commerce terms were
derived from. Its labels carry the property cardinality, e.g.
``acceptedPaymentMethods (0..*)``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional, Union

from rdflib import Graph, RDFS, URIRef

from .cardinality import Cardinality
from .graph import parse_graph

GOODRELATIONS_NAMESPACE = "http://purl.org/goodrelations/v1#"

# schema.org names that differ from their GoodRelations counterpart
PROPERTY_NAME_MAP = {
    "acceptedPaymentMethod": "acceptedPaymentMethods",
    "availableDeliveryMethod": "availableDeliveryMethods",
    "businessFunction": "hasBusinessFunction",
    "eligibleCustomerType": "eligibleCustomerTypes",
    "eligibleRegion": "eligibleRegions",
    "gtin13": "hasEAN_UCC-13",
    "inventoryLevel": "hasInventoryLevel",
    "itemOffered": "includes",
    "manufacturer": "hasManufacturer",
    "maxPrice": "hasMaxCurrencyValue",
    "minPrice": "hasMinCurrencyValue",
    "mpn": "hasMPN",
    "price": "hasCurrencyValue",
    "priceCurrency": "hasCurrency",
    "priceSpecification": "hasPriceSpecification",
    "sku": "hasStockKeepingUnit",
    "warranty": "hasWarrantyPromise",
    "warrantyScope": "hasWarrantyScope",
}

_CARDINALITY_PATTERN = re.compile(r"\([0-9*]\.\.[0-9*]\)")


class GoodRelationsBridge:
    """Oracle over one or more GoodRelations graphs.

    Args:
        graphs: rdflib graphs holding the GoodRelations vocabulary
    """

    def __init__(self, graphs: Iterable[Graph] = ()):
        self.graphs = list(graphs)

    @classmethod
    def from_files(cls, paths: Iterable[Union[str, Path]]) -> 'GoodRelationsBridge':
        return cls([parse_graph(path) for path in paths])

    @staticmethod
    def term_uri(property_name: str) -> URIRef:
        """GoodRelations URI for a schema.org property name."""
        return URIRef(GOODRELATIONS_NAMESPACE + PROPERTY_NAME_MAP.get(property_name, property_name))

    def exists(self, property_name: str) -> bool:
        """Is this schema.org property part of GoodRelations?"""
        uri = self.term_uri(property_name)
        return any((uri, None, None) in graph for graph in self.graphs)

    def extract_cardinality(self, property_name: str) -> Optional[Cardinality]:
        """Cardinality declared in the GoodRelations label, if any."""
        uri = self.term_uri(property_name)
        for graph in self.graphs:
            for label in graph.objects(uri, RDFS.label):
                match = _CARDINALITY_PATTERN.search(str(label))
                if match:
                    return Cardinality(match.group(0))
        return None
