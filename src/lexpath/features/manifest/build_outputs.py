"""Where: src/lexpath/features/manifest/build_outputs.py
What: Build-output records and the ``output.json`` manifest that persists them.
Why: Tasks hand outputs to each other as path values; the manifest keeps them
relative to the output folder so a moved folder still loads correctly.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, TextIO

from lexpath.features.path import PARENT, PathString, to_path_string
from lexpath.platform.logging import logger

from .codec import PATH_KEY, decode_path, encode_path
from .errors import ManifestFormatError

METADATA_FILE_NAME: Final[str] = "output.json"
OUTPUT_TYPE_KEY: Final[str] = "outputType"
TYPE_KEY: Final[str] = "type"
PROPERTIES_KEY: Final[str] = "properties"


@dataclass(frozen=True, slots=True)
class BuildOutput:
    """A single output produced by a build task."""

    output_type: str
    path: PathString
    properties: dict[str, str] = field(default_factory=dict)


def metadata_file(folder: Path) -> Path:
    """Return the manifest location for an output ``folder``."""

    return folder / METADATA_FILE_NAME


@dataclass(slots=True)
class BuildOutputManifest:
    """Ordered collection of build outputs that can be persisted as JSON."""

    outputs: list[BuildOutput] = field(default_factory=list)

    def __iter__(self) -> Iterator[BuildOutput]:
        return iter(self.outputs)

    def __len__(self) -> int:
        return len(self.outputs)

    def by_type(self, output_type: str) -> list[BuildOutput]:
        """Return the outputs of ``output_type`` in manifest order."""

        return [output for output in self.outputs if output.output_type == output_type]

    def element(self, output_type: str) -> BuildOutput | None:
        """Return the first output of ``output_type``, if any."""

        return next((output for output in self.outputs if output.output_type == output_type), None)

    def persist(self, base: PathString, indent: int | None = None) -> str:
        """Serialize the manifest to JSON.

        Absolute outputs below ``base`` are stored relative to it; anything
        else is stored as is. Outputs that are already relative are read as
        relative to the manifest folder, so ``load`` returns them resolved
        against ``base``.

        Args:
            base: Folder the manifest belongs to.
            indent: JSON indentation, ``None`` for a compact document.

        Returns:
            str: JSON array of output records.
        """
        records = [self._encode(output, base) for output in self.outputs]
        return json.dumps(records, indent=indent, ensure_ascii=False)

    @staticmethod
    def _encode(output: BuildOutput, base: PathString) -> dict[str, Any]:
        stored = output.path
        if stored.is_absolute and stored.filesystem_uri == base.filesystem_uri:
            relative = base.relativize(stored)
            names = relative.segments
            if relative.root is None and names and names[0] != PARENT:
                stored = relative

        record: dict[str, Any] = {OUTPUT_TYPE_KEY: {TYPE_KEY: output.output_type}}
        record.update(encode_path(stored, default_uri=base.filesystem_uri))
        record[PROPERTIES_KEY] = dict(output.properties)
        return record

    @classmethod
    def load(
        cls,
        base: PathString,
        reader: TextIO | str,
        types: Iterable[str] | None = None,
    ) -> BuildOutputManifest:
        """Parse a persisted manifest, resolving relative paths against ``base``.

        Every stored relative path on the manifest filesystem comes back as
        ``base`` resolved with it, including outputs recorded relative.

        Args:
            base: Folder the manifest belongs to.
            reader: Open text stream or JSON text.
            types: Output types to keep. ``None`` keeps every record.

        Returns:
            BuildOutputManifest: Outputs in document order.

        Raises:
            ManifestFormatError: If the document is not a list of output records.
        """
        try:
            document = json.loads(reader) if isinstance(reader, str) else json.load(reader)
        except json.JSONDecodeError as e:
            raise ManifestFormatError(f"Manifest is not valid JSON: {e}") from e

        if not isinstance(document, list):
            raise ManifestFormatError("Manifest must be a JSON array of output records")

        wanted = set(types) if types is not None else None
        outputs: list[BuildOutput] = []
        for record in document:
            output = cls._decode(record, base)
            if wanted is None or output.output_type in wanted:
                outputs.append(output)
        return cls(outputs)

    @staticmethod
    def _decode(record: object, base: PathString) -> BuildOutput:
        if not isinstance(record, dict):
            raise ManifestFormatError(f"Output record must be an object: {record!r}")

        output_type = record.get(OUTPUT_TYPE_KEY)
        type_name = output_type.get(TYPE_KEY) if isinstance(output_type, dict) else None
        if not isinstance(type_name, str):
            raise ManifestFormatError(f"Output record has no '{OUTPUT_TYPE_KEY}.{TYPE_KEY}': {record!r}")

        if PATH_KEY not in record:
            raise ManifestFormatError(f"Output record has no '{PATH_KEY}': {record!r}")
        path = decode_path(record, default_uri=base.filesystem_uri)
        if path.root is None and path.filesystem_uri == base.filesystem_uri:
            path = base.resolve(path)

        properties = record.get(PROPERTIES_KEY, {})
        if not isinstance(properties, dict):
            raise ManifestFormatError(f"'{PROPERTIES_KEY}' must be an object: {record!r}")

        return BuildOutput(
            output_type=type_name,
            path=path,
            properties={str(key): str(value) for key, value in properties.items()},
        )

    def save(self, folder: Path, indent: int | None = 2) -> Path:
        """Write the manifest to ``folder/output.json``.

        Returns:
            Path: The manifest file.
        """
        target = metadata_file(folder)
        content = self.persist(to_path_string(folder), indent=indent)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(
                "Failed to write manifest %s: %s",
                target,
                e,
                extra=_event_extra("manifest.error", folder, error_message=str(e)),
            )
            raise

        logger.info(
            "Saved manifest %s",
            target,
            extra=_event_extra("manifest.save", folder, entries=len(self)),
        )
        return target

    @classmethod
    def from_folder(cls, folder: Path, types: Iterable[str] | None = None) -> BuildOutputManifest:
        """Load the manifest stored in ``folder``; a missing file yields an empty manifest.

        Raises:
            ManifestFormatError: If the manifest exists but cannot be parsed.
        """
        target = metadata_file(folder)
        if not target.is_file():
            logger.debug(
                "No manifest at %s",
                target,
                extra=_event_extra("manifest.missing", folder),
            )
            return cls()

        try:
            with open(target, encoding="utf-8") as reader:
                manifest = cls.load(to_path_string(folder), reader, types)
        except ManifestFormatError as e:
            logger.error(
                "Failed to read manifest %s: %s",
                target,
                e,
                extra=_event_extra("manifest.error", folder, error_message=str(e)),
            )
            raise

        logger.info(
            "Loaded manifest %s",
            target,
            extra=_event_extra("manifest.load", folder, entries=len(manifest)),
        )
        return manifest


def _event_extra(event: str, folder: Path, **details: object) -> dict[str, object]:
    """Log extras for ``PathRichHandler``; paths display relative to the folder's parent."""

    return {
        "path_event": event,
        "manifest_path": str(metadata_file(folder)),
        "base_path": str(folder.parent),
        **details,
    }


__all__ = [
    "BuildOutput",
    "BuildOutputManifest",
    "METADATA_FILE_NAME",
    "metadata_file",
]
