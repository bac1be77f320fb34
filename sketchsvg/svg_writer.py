"""
SVG serialization of converted drawings.
"""

import os
import re
import xml.etree.ElementTree as ET

from .constants import SVG_NAMESPACE, SVG_VERSION
from .drawing import Drawing
from .path import format_number

_EMPTY_XMLNS = re.compile(r'\s*xmlns=(""|\'\')')


def stroke_style(drawing: Drawing) -> str:
    stroke_width = format_number(drawing.stroke_width)
    return f"path{{stroke:black; stroke-width: {stroke_width}; fill: transparent}}"


def ensure_namespace(xml: str) -> str:
    """Drop empty xmlns attributes and make sure the root declares the SVG namespace."""
    xml = _EMPTY_XMLNS.sub("", xml)
    if "xmlns" not in xml:
        xml = xml[:4] + f' xmlns="{SVG_NAMESPACE}"' + xml[4:]
    return xml


def drawing_to_svg(drawing: Drawing) -> str:
    """Serialize a drawing into an SVG document string."""
    svg = ET.Element(
        "svg",
        {
            "version": SVG_VERSION,
            "x": "0px",
            "y": "0px",
            "viewBox": drawing.viewport.view_box,
            "xmlns": SVG_NAMESPACE,
        },
    )
    style = ET.SubElement(svg, "style")
    style.text = stroke_style(drawing)
    for path in drawing.paths:
        element = ET.SubElement(svg, "path", {"d": path})
        element.tail = "\n"
    style.tail = "\n"
    svg.text = "\n"

    return ensure_namespace(ET.tostring(svg, encoding="unicode"))


def output_name(project: str, component: str, ordinal: int) -> str:
    """File name for the ordinal-th drawing of a component: <project>_<component>_<ordinal>.svg"""
    return f"{project}_{component}_{ordinal}.svg"


def write_svg(drawing: Drawing, file_name: str) -> str:
    directory = os.path.dirname(file_name)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_name, "w", encoding="utf-8") as fp:
        fp.write(drawing_to_svg(drawing))
    return file_name
