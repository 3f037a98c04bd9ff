"""schemaorg-model - Generate Python model classes from a schema.org vocabulary.

Turns a schema.org-shaped RDF vocabulary into entity classes, companion
interfaces and enumerations, each carrying structural and
extension-supplied metadata.

Architecture:
- ontology/: read-only vocabulary graph, cardinalities, GoodRelations bridge
- model/: class model resolution and cross-descriptor passes
- annotation/: pluggable annotation generators and their pipeline
- output/: output paths, Jinja2 rendering and ruff post-processing
- generator: run orchestration
- cli: command line entry point
"""

__version__ = "0.1.0"
