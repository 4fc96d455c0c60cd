"""Aggregation of geometries into the envelope of all their extents."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from geospan.geometry import BoundingBox, Geometry, Polygon, extent

__all__ = ["EnvelopeAggregate", "envelope_agg"]


@dataclass
class EnvelopeAggregate:
    """Running envelope; missing and vertex-less geometries are ignored."""

    box: BoundingBox | None = None

    def _merge(self, other: BoundingBox) -> None:
        if self.box is None:
            self.box = other
            return
        self.box = BoundingBox(
            min(self.box.minx, other.minx),
            min(self.box.miny, other.miny),
            max(self.box.maxx, other.maxx),
            max(self.box.maxy, other.maxy),
        )

    def add(self, geom: Geometry | None) -> None:
        """Widen the envelope to hold the extent of ``geom``."""
        box = extent(geom)
        if box is not None:
            self._merge(box)

    def combine(self, other: EnvelopeAggregate) -> None:
        """Merge another partial aggregate into this one."""
        if other.box is not None:
            self._merge(other.box)

    def result(self) -> Polygon | None:
        """The envelope as a closed rectangular polygon, or None if nothing was added."""
        if self.box is None:
            return None
        b = self.box
        return Polygon(
            (
                (
                    (b.minx, b.miny),
                    (b.maxx, b.miny),
                    (b.maxx, b.maxy),
                    (b.minx, b.maxy),
                    (b.minx, b.miny),
                ),
            )
        )


def envelope_agg(geometries: Iterable[Geometry | None]) -> Polygon | None:
    """Envelope of every geometry in ``geometries``."""
    agg = EnvelopeAggregate()
    for geom in geometries:
        agg.add(geom)
    return agg.result()