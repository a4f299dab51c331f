"""BIOS attribute library.

Vendors expose BIOS settings under terse, generation-specific keys
(``Rome0039``). The library maps those keys to descriptors dumped from the
BMC so output can show ``Rome0039 (SMT Control)`` instead.

Descriptors ship as one JSON document per attribute under
``gru/bios/data/<vendor>/<family>/<generation>/``. Adding a document to that
directory adds the attribute to the library.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from importlib import resources
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gru.exceptions import (
    AttributeExistsError,
    AttributeParseError,
    AttributeSourceNotFoundError,
)

logger = structlog.get_logger()

DEFAULT_GENERATION = "amd/epyc/rome"

Document = tuple[str, str | bytes]


class AttributeChoice(BaseModel):
    """One allowed value of an enumerated attribute."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    value_name: str = Field(alias="ValueName")
    value_display_name: str = Field(default="", alias="ValueDisplayName")


class AttributeDescriptor(BaseModel):
    """Metadata for a single BIOS attribute.

    ``value_kind`` is kept as the vendor's type tag (``Integer``,
    ``Enumeration``, ...) and ``default_value`` as whatever scalar the vendor
    reported, since the source data is not consistently typed.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(alias="AttributeName", min_length=1)
    display_name: str = Field(default="", alias="DisplayName")
    help_text: str = Field(default="", alias="HelpText")
    read_only: bool = Field(default=False, alias="ReadOnly")
    value_kind: str = Field(default="", alias="Type")
    default_value: bool | int | float | str | None = Field(default=None, alias="DefaultValue")
    choices: tuple[AttributeChoice, ...] = Field(default=(), alias="Value")

    @property
    def label(self) -> str:
        """Human readable ``name (display name)`` label."""
        return f"{self.name} ({self.display_name})"


def parse_descriptor(source: str, raw: str | bytes) -> AttributeDescriptor:
    """Parse one attribute document.

    Raises:
        AttributeParseError: If the document is not a valid descriptor. The
            raw content is attached for diagnostics.
    """
    try:
        return AttributeDescriptor.model_validate_json(raw, strict=True)
    except ValidationError as e:
        text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        raise AttributeParseError(source, text, original_error=e) from e


class AttributeLibrary:
    """Mapping of attribute name to descriptor.

    Bulk loading keeps the first descriptor seen for a name and ignores later
    ones; explicit registration of a known name is an error. Entries are never
    removed.
    """

    def __init__(self) -> None:
        self._attributes: dict[str, AttributeDescriptor] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_documents(cls, documents: Iterable[Document]) -> AttributeLibrary:
        """Build a library from ``(source_name, raw)`` documents."""
        library = cls()
        library.load(documents)
        return library

    @classmethod
    def from_package(cls, generation: str = DEFAULT_GENERATION) -> AttributeLibrary:
        """Build a library from the corpus bundled for ``generation``.

        Args:
            generation: Corpus directory under the package data, e.g.
                ``amd/epyc/rome``.

        Raises:
            AttributeSourceNotFoundError: If no corpus ships for ``generation``.
        """
        base = resources.files("gru.bios").joinpath("data")
        for part in generation.strip("/").split("/"):
            base = base.joinpath(part)
        if not base.is_dir():
            raise AttributeSourceNotFoundError(
                f"no built-in BIOS attributes for {generation}", location=generation
            )

        documents = [
            (entry.name, entry.read_bytes())
            for entry in base.iterdir()
            if entry.is_file() and entry.name.endswith(".json")
        ]
        library = cls.from_documents(documents)
        logger.debug("Loaded built-in BIOS attributes", generation=generation, count=len(library))
        return library

    def load(self, documents: Iterable[Document]) -> int:
        """Add every document, keeping the first descriptor for each name.

        Documents are processed in lexicographic order of their source name
        so precedence does not depend on directory listing order.

        Returns:
            Number of descriptors added.

        Raises:
            AttributeParseError: If any document is malformed.
        """
        added = 0
        with self._lock:
            for source, raw in sorted(documents, key=lambda doc: doc[0]):
                descriptor = parse_descriptor(source, raw)
                if descriptor.name in self._attributes:
                    logger.debug(
                        "Ignoring duplicate BIOS attribute",
                        attribute=descriptor.name,
                        source=source,
                    )
                    continue
                self._attributes[descriptor.name] = descriptor
                added += 1
        return added

    def load_directory(self, path: Path | str) -> int:
        """Add every ``*.json`` document in ``path`` (first wins).

        Returns:
            Number of descriptors added.

        Raises:
            AttributeSourceNotFoundError: If ``path`` is not a directory.
            AttributeParseError: If any document is malformed.
        """
        directory = Path(path).expanduser()
        if not directory.is_dir():
            raise AttributeSourceNotFoundError(
                f"BIOS attribute directory {directory} does not exist", location=str(directory)
            )
        documents = [(p.name, p.read_bytes()) for p in directory.glob("*.json") if p.is_file()]
        added = self.load(documents)
        logger.debug("Loaded BIOS attribute directory", path=str(directory), added=added)
        return added

    def register(self, descriptor: AttributeDescriptor) -> None:
        """Add a single descriptor.

        Raises:
            AttributeExistsError: If the name is already registered. The
                library is left unchanged.
        """
        with self._lock:
            if descriptor.name in self._attributes:
                raise AttributeExistsError(descriptor.name)
            self._attributes[descriptor.name] = descriptor

    def get(self, key: str) -> AttributeDescriptor | None:
        return self._attributes.get(key)

    def decode(self, key: str, json_mode: bool) -> str:
        """Translate an attribute key for display.

        Unknown keys are returned unchanged. Known keys become the canonical
        attribute name in JSON mode and ``name (display name)`` otherwise.
        """
        descriptor = self._attributes.get(key)
        if descriptor is None:
            return key
        if json_mode:
            return descriptor.name
        return descriptor.label

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __len__(self) -> int:
        return len(self._attributes)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._attributes))
