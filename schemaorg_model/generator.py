"""Types generator: runs a whole generation from vocabulary to files.

Select -> Classify -> Resolve(parent, fields) -> Extend ->
SecondPass(TypeHint, Uses) -> Render -> PostProcess.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .annotation.base import AnnotationContext
from .annotation.pipeline import AnnotationPipeline
from .config import GeneratorConfig
from .errors import ConfigError
from .model.builder import ClassModelBuilder
from .model.descriptors import ClassDescriptor, python_identifier
from .model.resolvers import TypeHintResolver, UsesResolver
from .ontology.cardinality import CardinalityIndex, extract_cardinalities
from .ontology.goodrelations import GoodRelationsBridge
from .ontology.graph import OntologyModel
from .output.formatter import FormatterChain
from .output.paths import OutputPathResolver
from .output.renderer import Renderer

logger = logging.getLogger(__name__)


class TypesGenerator:
    """Generates model classes for a vocabulary.

    Args:
        ontology: Vocabulary model
        bridge: GoodRelations oracle (empty bridge when omitted)
        cardinalities: Precomputed cardinality index; extracted once from
            ``ontology`` and ``bridge`` when omitted
        renderer: Template renderer
        formatter: Post-processor run over the written files (None disables)
        log: Diagnostics sink

    Example:
        ontology = OntologyModel.from_files(["schema.ttl"])
        generator = TypesGenerator(ontology)
        written = generator.generate(load_config("schema.yml"))
    """

    def __init__(
        self,
        ontology: OntologyModel,
        bridge: Optional[GoodRelationsBridge] = None,
        cardinalities: Optional[CardinalityIndex] = None,
        renderer: Optional[Renderer] = None,
        formatter: Optional[FormatterChain] = None,
        log: Optional[logging.Logger] = None,
    ):
        self.ontology = ontology
        self.bridge = bridge or GoodRelationsBridge()
        self.log = log or logger
        self.cardinalities = (
            cardinalities if cardinalities is not None else extract_cardinalities(ontology, self.bridge)
        )
        self.renderer = renderer or Renderer()
        self.formatter = formatter

    def build(self, config: GeneratorConfig) -> dict[str, ClassDescriptor]:
        """Resolve, annotate and cross-reference all descriptors (no I/O).

        Raises:
            ConfigError: If the configured vocabulary namespace is not the one
                the ontology was loaded with
        """
        if config.vocabulary_namespace != self.ontology.namespace:
            raise ConfigError(
                f"vocabularyNamespace {config.vocabulary_namespace!r} does not match "
                f"the ontology namespace {self.ontology.namespace!r}"
            )

        classes = ClassModelBuilder(self.ontology, config, self.bridge, self.log).build()

        context = AnnotationContext(
            logger=self.log,
            ontology=self.ontology,
            cardinalities=self.cardinalities,
            config=config,
            classes=classes,
        )
        pipeline = AnnotationPipeline.from_names(config.annotation_generators, context)
        pipeline.annotate(classes)

        TypeHintResolver(classes, self.log).resolve()
        UsesResolver(classes, pipeline).resolve()
        return classes

    def write(self, classes: dict[str, ClassDescriptor], config: GeneratorConfig) -> list[Path]:
        """Render every descriptor to its module; returns the written paths."""
        paths = OutputPathResolver(config.output)
        written = []

        for descriptor in classes.values():
            paths.ensure_dir(descriptor.namespace)
            path = paths.module_path(descriptor.namespace, python_identifier(descriptor.name))
            path.write_text(self.renderer.render_class(descriptor, classes, config, self.cardinalities))
            written.append(path)

            if descriptor.has_interface:
                paths.ensure_dir(descriptor.interface_namespace)
                path = paths.module_path(
                    descriptor.interface_namespace, python_identifier(descriptor.interface_name)
                )
                path.write_text(self.renderer.render_interface(descriptor, config))
                written.append(path)

        return written

    def generate(self, config: GeneratorConfig) -> list[Path]:
        """Full run: build descriptors, write modules, format what was written."""
        classes = self.build(config)
        written = self.write(classes, config)
        self.log.info("Generated %d files in %s", len(written), config.output)

        if self.formatter is not None:
            self.formatter.format_files(written)
        return written
