"""Descriptor readers for the modern and legacy project model schemas."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import ValidationError

from pomstore.domain.errors import ProjectModelReadError
from pomstore.domain.model import RepositoryLayout

from .schema import LegacyProjectPayload, ProjectPayload
from .translator import model_from_legacy_payload, model_from_payload

if TYPE_CHECKING:
    from pathlib import Path

    from pomstore.domain.model import ProjectModel
    from pomstore.domain.ports.modelling import ProjectModelReader

log = getLogger(__name__)

MODEL_VERSION_400: Final[str] = "4.0.0"
POM_VERSION_3: Final[str] = "3"

_SCALAR_FIELDS: Final[tuple[str, ...]] = (
    "modelVersion",
    "groupId",
    "artifactId",
    "version",
    "packaging",
    "name",
    "description",
    "url",
)
_LEGACY_SCALAR_FIELDS: Final[tuple[str, ...]] = (
    "pomVersion",
    "id",
    "groupId",
    "artifactId",
    "currentVersion",
    "name",
    "shortDescription",
    "description",
    "url",
)
_PARENT_FIELDS: Final[tuple[str, ...]] = ("groupId", "artifactId", "version", "relativePath")
_DEPENDENCY_FIELDS: Final[tuple[str, ...]] = (
    "groupId",
    "artifactId",
    "version",
    "type",
    "classifier",
    "scope",
    "optional",
)
_LEGACY_DEPENDENCY_FIELDS: Final[tuple[str, ...]] = (
    "id",
    "groupId",
    "artifactId",
    "version",
    "type",
)


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified tags."""

    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def _children(element: ET.Element | None, name: str) -> list[ET.Element]:
    if element is None:
        return []
    return [child for child in element if local_name(child.tag) == name]


def _text(element: ET.Element | None) -> str | None:
    if element is None or element.text is None:
        return None
    return element.text.strip()


def _scalars(element: ET.Element, names: tuple[str, ...]) -> dict[str, object]:
    values: dict[str, object] = {}
    for name in names:
        value = _text(_child(element, name))
        if value is not None:
            values[name] = value
    return values


def _dependency_list(container: ET.Element | None, names: tuple[str, ...]) -> list[object]:
    return [_scalars(dep, names) for dep in _children(container, "dependency")]


class _XmlProjectModelReader(ABC):
    """Shared parsing steps: XML document, root check, payload validation."""

    schema_name: ClassVar[str]

    def read(self, path: Path) -> ProjectModel:
        try:
            tree = ET.parse(path)  # noqa: S314
        except ET.ParseError as exc:
            raise ProjectModelReadError(f"Unable to parse {path}: {exc}") from exc
        except OSError as exc:
            raise ProjectModelReadError(f"Unable to read {path}: {exc}") from exc

        root = tree.getroot()
        if local_name(root.tag) != "project":
            raise ProjectModelReadError(
                f"{path} is not a {self.schema_name} descriptor: root element "
                f"<{local_name(root.tag)}>"
            )
        try:
            model = self._translate(root)
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ProjectModelReadError(
                f"Invalid {self.schema_name} descriptor {path}: {details}"
            ) from exc
        except ValueError as exc:
            raise ProjectModelReadError(
                f"Invalid {self.schema_name} descriptor {path}: {exc}"
            ) from exc
        log.debug("Read %s descriptor %s", self.schema_name, path)
        return model

    @abstractmethod
    def _translate(self, root: ET.Element) -> ProjectModel: ...


class Model400Reader(_XmlProjectModelReader):
    """Reads modern ``pom.xml`` documents (model version 4.0.0)."""

    schema_name = "model 4.0.0"

    def _translate(self, root: ET.Element) -> ProjectModel:
        payload = ProjectPayload.model_validate(self.to_mapping(root))
        if payload.model_version is not None and payload.model_version != MODEL_VERSION_400:
            raise ValueError(f"unsupported modelVersion {payload.model_version}")
        return model_from_payload(payload)

    @staticmethod
    def to_mapping(root: ET.Element) -> dict[str, object]:
        mapping = _scalars(root, _SCALAR_FIELDS)

        parent = _child(root, "parent")
        if parent is not None:
            mapping["parent"] = _scalars(parent, _PARENT_FIELDS)

        properties = _child(root, "properties")
        if properties is not None:
            mapping["properties"] = {
                local_name(prop.tag): (prop.text or "").strip() for prop in properties
            }

        mapping["dependencies"] = _dependency_list(
            _child(root, "dependencies"), _DEPENDENCY_FIELDS
        )
        management = _child(root, "dependencyManagement")
        if management is not None:
            mapping["dependencyManagement"] = _dependency_list(
                _child(management, "dependencies"), _DEPENDENCY_FIELDS
            )
        modules = _children(_child(root, "modules"), "module")
        mapping["modules"] = [text for text in (_text(module) for module in modules) if text]
        return mapping


class Model300Reader(_XmlProjectModelReader):
    """Reads legacy ``project.xml`` documents (POM version 3)."""

    schema_name = "model 3.0.0"

    def _translate(self, root: ET.Element) -> ProjectModel:
        payload = LegacyProjectPayload.model_validate(self.to_mapping(root))
        if payload.pom_version is not None and payload.pom_version != POM_VERSION_3:
            raise ValueError(f"unsupported pomVersion {payload.pom_version}")
        return model_from_legacy_payload(payload)

    @staticmethod
    def to_mapping(root: ET.Element) -> dict[str, object]:
        mapping = _scalars(root, _LEGACY_SCALAR_FIELDS)
        mapping["dependencies"] = _dependency_list(
            _child(root, "dependencies"), _LEGACY_DEPENDENCY_FIELDS
        )
        return mapping


def default_readers() -> dict[RepositoryLayout, ProjectModelReader]:
    """Return the reader for each repository layout."""

    return {
        RepositoryLayout.DEFAULT: Model400Reader(),
        RepositoryLayout.LEGACY: Model300Reader(),
    }
