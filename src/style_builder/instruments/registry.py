"""
Instrument Registry - loads instrument descriptors from a directory.

Instruments are keyed by descriptor file stem. Tracks refer to them by
their ``type`` field instead, so lookups go through find_by_type.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from style_builder.descriptors import list_descriptor_files, read_descriptor
from style_builder.errors import MalformedDescriptorError
from style_builder.models.instrument import Instrument, InstrumentDefinition

logger = logging.getLogger(__name__)


class InstrumentRegistry:
    """
    Keyed collection of loaded instruments.

    Immutable once loaded. When several instruments share a type, the
    first one in load order wins.
    """

    def __init__(self, instruments: Iterable[Instrument] = ()):
        """
        Initialize the registry.

        Args:
            instruments: Instruments in load order
        """
        self._instruments: dict[str, Instrument] = {}
        self._by_type: dict[str, Instrument] = {}
        for instrument in instruments:
            self._add(instrument)

    @classmethod
    async def load(cls, directory: Path) -> InstrumentRegistry:
        """
        Load every instrument descriptor in a directory.

        Args:
            directory: Directory of ``*.yaml`` instrument files

        Returns:
            The populated registry

        Raises:
            MalformedDescriptorError: if any file fails to parse or two
                files share a name
        """
        registry = cls()
        for path in list_descriptor_files(directory):
            definition = read_descriptor(path, "instrument", InstrumentDefinition)
            if path.stem in registry:
                raise MalformedDescriptorError(path, f"duplicate instrument name {path.stem!r}")
            registry._add(Instrument.from_definition(path.stem, definition))

        logger.info("Loaded %d instruments from %s", len(registry), directory)
        return registry

    def find_by_type(self, instrument_type: str) -> Instrument | None:
        """
        Find the instrument a track asks for.

        Returns None when nothing matches so the caller can report which
        track asked.
        """
        return self._by_type.get(instrument_type)

    def get(self, name: str) -> Instrument | None:
        """Get an instrument by descriptor file stem."""
        return self._instruments.get(name)

    def names(self) -> list[str]:
        """Descriptor file stems, in load order."""
        return list(self._instruments)

    def _add(self, instrument: Instrument) -> None:
        if instrument.name in self._instruments:
            raise ValueError(f"Duplicate instrument name: {instrument.name}")
        self._instruments[instrument.name] = instrument
        if instrument.instrument_type in self._by_type:
            logger.debug(
                "Instrument %s shadowed by %s for type %r",
                instrument.name,
                self._by_type[instrument.instrument_type].name,
                instrument.instrument_type,
            )
        else:
            self._by_type[instrument.instrument_type] = instrument

    def __len__(self) -> int:
        return len(self._instruments)

    def __iter__(self) -> Iterator[Instrument]:
        return iter(self._instruments.values())

    def __contains__(self, name: object) -> bool:
        return name in self._instruments
