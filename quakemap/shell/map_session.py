"""Map Session - Imperative Shell.

This module owns the interactive map: the folium map object, its base
tile layers, and the two overlay groups the loader fills in. A single
MapSession is created at startup and passed to the loader and legend
builder.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import folium

from quakemap.core.config import Config
from quakemap.core.feature import StyledMarker
from quakemap.core.style import PLATE_LINE_STYLE


logger = logging.getLogger(__name__)


EARTHQUAKES_LAYER = "Earthquakes"
TECTONICS_LAYER = "Tectonic Plates"


@dataclass
class MapSession:
    """The map and its overlay groups for one render.

    Attributes:
        folium_map: The folium map instance
        earthquakes: Overlay group for earthquake markers
        tectonics: Overlay group for plate boundary lines
        attached: Names of overlay groups attached to the map, in order
        markers: Markers rendered into the earthquake group
        plate_lines: Paths rendered into the tectonic group
    """
    folium_map: folium.Map
    earthquakes: folium.FeatureGroup
    tectonics: folium.FeatureGroup
    attached: list[str] = field(default_factory=list)
    markers: list[StyledMarker] = field(default_factory=list)
    plate_lines: list[list[tuple[float, float]]] = field(default_factory=list)
    finalized: bool = False

    def add_marker(self, marker: StyledMarker) -> folium.CircleMarker:
        """Render a styled marker into the earthquake group.

        Raises:
            ValueError: If folium rejects the marker position
        """
        circle = folium.CircleMarker(
            location=list(marker.position),
            radius=marker.radius,
            color=marker.color,
            fill=True,
            fill_color=marker.fill_color,
            popup=folium.Popup(marker.popup_text, max_width=300),
        )
        circle.add_to(self.earthquakes)
        self.markers.append(marker)
        return circle

    def add_plate_line(self, path: list[tuple[float, float]]) -> folium.PolyLine:
        """Render one plate boundary path into the tectonic group."""
        line = folium.PolyLine(
            locations=path,
            color=PLATE_LINE_STYLE.color,
            weight=PLATE_LINE_STYLE.weight,
        )
        line.add_to(self.tectonics)
        self.plate_lines.append(path)
        return line

    def attach(self, group: folium.FeatureGroup) -> None:
        """Attach an overlay group to the map (at most once)."""
        if self.is_attached(group):
            return
        group.add_to(self.folium_map)
        self.attached.append(group.layer_name)
        logger.info("Attached overlay '%s'", group.layer_name)

    def is_attached(self, group: folium.FeatureGroup) -> bool:
        return group.layer_name in self.attached

    def finalize(self) -> None:
        """Add the layer control once all overlays are in place.

        The control only lists layers attached before it renders, so this
        runs after loading rather than at startup.
        """
        if self.finalized:
            return
        folium.LayerControl(collapsed=True).add_to(self.folium_map)
        self.finalized = True

    def render_html(self) -> str:
        """Render the complete standalone HTML page."""
        self.finalize()
        return self.folium_map.get_root().render()

    def save(self, path: str | Path) -> Path:
        """Write the HTML page to disk.

        This method performs file I/O.
        """
        self.finalize()
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)
        self.folium_map.save(str(output))
        logger.info("Saved map to %s", output)
        return output


def create_map_session(config: Config) -> MapSession:
    """Create the map, its base layers, and both (empty) overlay groups.

    Overlay groups are created here but attached only once the loader has
    filled them.

    Args:
        config: Application configuration

    Returns:
        New MapSession
    """
    folium_map = folium.Map(
        location=list(config.center),
        zoom_start=config.zoom,
        tiles=None,
    )

    for layer in config.base_layers:
        folium.TileLayer(
            tiles=layer.tiles,
            attr=layer.attribution,
            name=layer.name,
            overlay=False,
            control=True,
            show=layer.show,
        ).add_to(folium_map)

    logger.info(
        "Created map at (%.2f, %.2f) zoom %d with %d base layers",
        config.center_latitude,
        config.center_longitude,
        config.zoom,
        len(config.base_layers),
    )

    return MapSession(
        folium_map=folium_map,
        earthquakes=folium.FeatureGroup(name=EARTHQUAKES_LAYER),
        tectonics=folium.FeatureGroup(name=TECTONICS_LAYER),
    )
