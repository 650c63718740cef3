"""Generation driver.

Walks a discovery document once: every schema becomes a model class in
``<root>.model`` and every resource becomes a Retrofit interface in
``<root>``, where ``<root>`` is derived from the host of the document's base
URL. Units are emitted one after the other; the first error aborts the run.
"""

import logging
from collections.abc import Iterable, Mapping

from gce2retrofit.codegen.builders import InterfaceBuilder, ModelBuilder
from gce2retrofit.codegen.class_map import ClassMap
from gce2retrofit.codegen.document_loader import DocumentLoader
from gce2retrofit.codegen.emitter import CodeEmitter, FileEmitter
from gce2retrofit.codegen.processors import ParameterProcessor
from gce2retrofit.codegen.types import TypeMapper
from gce2retrofit.codegen.utils import get_package_name, get_path
from gce2retrofit.config import DocumentConfig, MethodType
from gce2retrofit.discovery import DiscoveryDocument

logger = logging.getLogger(__name__)

__all__ = ['Codegen', 'generate']


def generate(
    document: DiscoveryDocument,
    emitter: CodeEmitter,
    method_types: Iterable[MethodType] | None = None,
    class_map: Mapping[str, str] | None = None,
    type_mapper: TypeMapper | None = None,
) -> list[str]:
    """Generate model classes and Retrofit interfaces for a document.

    Args:
        document: The parsed discovery document.
        emitter: Receives one unit per schema and one per resource.
        method_types: Call shapes to generate; empty or None means both.
        class_map: Optional property-name to type-name overrides for models.
        type_mapper: Mapper shared by all builders of this run.

    Returns:
        The locations of the emitted units, schemas first.

    Raises:
        UnsupportedTypeError: If a type descriptor cannot be mapped.
        MissingParameterError: If a parameterOrder entry is not declared.
        OutputError: If a unit cannot be written or two units collide.
    """
    type_mapper = type_mapper or TypeMapper()
    package_name = get_package_name(document.base_url)
    model_package_name = f'{package_name}.model'

    model_builder = ModelBuilder(model_package_name, type_mapper, class_map)
    interface_builder = InterfaceBuilder(
        package_name, type_mapper, method_types, ParameterProcessor()
    )

    logger.info(
        f'Generating {len(document.schemas)} models and '
        f'{len(document.resources)} interfaces into {package_name}'
    )

    locations = []
    for schema in document.schemas.values():
        path = get_path(model_package_name, model_builder.file_name(schema))
        locations.append(emitter.emit(path, model_builder.build(schema)))

    for resource in document.resources.values():
        path = get_path(package_name, interface_builder.file_name(resource))
        locations.append(emitter.emit(path, interface_builder.build(resource)))

    return locations


class Codegen:
    """Runs generation for one configured discovery document.

    Example:
        >>> config = DocumentConfig(source='./compute.json', output='./src/main/java')
        >>> Codegen(config).generate()
    """

    def __init__(
        self,
        config: DocumentConfig,
        loader: DocumentLoader | None = None,
        emitter: CodeEmitter | None = None,
    ):
        self.config = config
        self._loader = loader or DocumentLoader()
        self._emitter = emitter or FileEmitter(config.output)
        self.document: DiscoveryDocument | None = None

    def _load_class_map(self) -> ClassMap | None:
        if not self.config.class_map:
            return None
        return ClassMap.load_file(self.config.class_map)

    def generate(self) -> list[str]:
        """Load the document and class map, then emit every unit.

        Returns:
            The locations of the emitted units.
        """
        self.document = self._loader.load(self.config.source)
        class_map = self._load_class_map()
        locations = generate(
            self.document,
            self._emitter,
            method_types=self.config.methods,
            class_map=class_map,
        )
        logger.info(f'Generated {len(locations)} files from {self.config.source}')
        return locations
