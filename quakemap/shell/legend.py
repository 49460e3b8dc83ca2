"""Depth Legend Control - Imperative Shell.

This module places the depth legend panel on the map as a Leaflet
control. The panel content comes from the core legend builder.
"""

import logging

from branca.element import MacroElement, Template

from quakemap.core.legend import build_legend_html, legend_entries
from quakemap.shell.map_session import MapSession


logger = logging.getLogger(__name__)


class DepthLegend(MacroElement):
    """Static legend panel pinned to one corner of the map.

    Args:
        html: Panel body HTML
        position: Leaflet control position (e.g., "bottomright")
    """

    _template = Template("""
        {% macro header(this, kwargs) %}
            <style>
                .legend {
                    background: white;
                    padding: 6px 10px;
                    line-height: 20px;
                    border-radius: 5px;
                    box-shadow: 0 0 15px rgba(0, 0, 0, 0.2);
                    color: #333;
                }
                .legend h4 {
                    margin: 0 0 6px;
                }
                .legend-item i {
                    display: inline-block;
                    width: 18px;
                    height: 18px;
                    margin-right: 8px;
                    vertical-align: middle;
                    opacity: 0.8;
                }
            </style>
        {% endmacro %}

        {% macro script(this, kwargs) %}
            var {{ this.get_name() }} = L.control({position: {{ this.position|tojson }}});
            {{ this.get_name() }}.onAdd = function (map) {
                var div = L.DomUtil.create("div", "legend");
                div.innerHTML = {{ this.html|tojson }};
                return div;
            };
            {{ this.get_name() }}.addTo({{ this._parent.get_name() }});
        {% endmacro %}
    """)

    def __init__(self, html: str, position: str = "bottomright") -> None:
        super().__init__()
        self._name = "DepthLegend"
        self.html = html
        self.position = position


def add_legend(session: MapSession, position: str = "bottomright") -> DepthLegend:
    """Build the depth legend and attach it to the session's map.

    Args:
        session: Map session to attach to
        position: Map corner for the panel

    Returns:
        The attached legend element
    """
    entries = legend_entries()
    legend = DepthLegend(build_legend_html(entries=entries), position=position)
    legend.add_to(session.folium_map)

    logger.info("Added depth legend with %d entries at %s", len(entries), position)

    return legend
