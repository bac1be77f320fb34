import json
import logging
from typing import Dict, Optional

from ..cad_types import Vector
from ..constants import ARC_TYPE, CIRCLE_TYPE, LINE_TYPE, SKETCH_ENTITY_TYPE
from ..primitives import Arc, Circle, Curve, Line, Loop, Profile, Sketch, UnsupportedCurve

logger = logging.getLogger(__name__)


class Fusion360ReconstructionParser:
    """
    Reads sketches out of Fusion 360 Gallery reconstruction JSON files.

    Only the profile geometry is used: entities of type "Sketch" with a
    "profiles" member become Sketch objects, each profile loop becomes a Loop
    of Line, Arc and Circle curves. Extrude entities are ignored.
    """

    @staticmethod
    def load_json(json_file_path):
        with open(json_file_path) as fp:
            return json.load(fp)

    @staticmethod
    def parse_point(point_dict) -> Vector:
        return Vector.from_json(point_dict)

    @staticmethod
    def parse_curve(curve_dict, curve_name: Optional[str] = None) -> Curve:
        curve_type = curve_dict["type"]
        name = curve_name or curve_dict.get("curve", "unnamed_curve")
        if curve_type == LINE_TYPE:
            return Line(
                start_point=Fusion360ReconstructionParser.parse_point(curve_dict["start_point"]),
                end_point=Fusion360ReconstructionParser.parse_point(curve_dict["end_point"]),
                name=f"line_{name}",
            )
        elif curve_type == ARC_TYPE:
            return Arc(
                start_point=Fusion360ReconstructionParser.parse_point(curve_dict["start_point"]),
                end_point=Fusion360ReconstructionParser.parse_point(curve_dict["end_point"]),
                center=Fusion360ReconstructionParser.parse_point(curve_dict["center_point"]),
                radius=curve_dict["radius"],
                start_angle=curve_dict["start_angle"],
                end_angle=curve_dict["end_angle"],
                name=f"arc_{name}",
            )
        elif curve_type == CIRCLE_TYPE:
            return Circle(
                center=Fusion360ReconstructionParser.parse_point(curve_dict["center_point"]),
                radius=curve_dict["radius"],
                name=f"circle_{name}",
            )
        # NURBS, ellipses and the like are kept so the sketch can be skipped as a whole
        return UnsupportedCurve(curve_type, data=curve_dict, name=name)

    @staticmethod
    def parse_loop(loop_dict) -> Loop:
        curves = [
            Fusion360ReconstructionParser.parse_curve(curve)
            for curve in loop_dict["profile_curves"]
        ]
        return Loop(curves, is_outer=loop_dict.get("is_outer", True))

    @staticmethod
    def parse_profile(profile_id: str, profile_dict) -> Profile:
        loops = [
            Fusion360ReconstructionParser.parse_loop(loop)
            for loop in profile_dict["loops"]
        ]
        return Profile(loops, name=profile_id)

    @staticmethod
    def is_sketch_entity(entity) -> bool:
        return (
            isinstance(entity, dict)
            and entity.get("type") == SKETCH_ENTITY_TYPE
            and bool(entity.get("profiles"))
        )

    @staticmethod
    def parse_sketch(entity_id: str, entity) -> Sketch:
        profiles = [
            Fusion360ReconstructionParser.parse_profile(profile_id, profile)
            for profile_id, profile in entity["profiles"].items()
        ]
        return Sketch(profiles, name=entity.get("name", entity_id))

    @staticmethod
    def entities(json_obj) -> Dict[str, dict]:
        """
        The entity mapping of a reconstruction file.

        Raises:
            ValueError: if the file is not a JSON object with an entity mapping
        """
        if not isinstance(json_obj, dict):
            raise ValueError(
                f"Reconstruction root must be a JSON object, got {type(json_obj).__name__}"
            )
        entities = json_obj.get("entities", {})
        if not isinstance(entities, dict):
            raise ValueError(
                f"Reconstruction entities must be a JSON object, got {type(entities).__name__}"
            )
        return entities

    @staticmethod
    def count_sketch_entities(json_obj) -> int:
        return sum(
            1
            for entity in Fusion360ReconstructionParser.entities(json_obj).values()
            if Fusion360ReconstructionParser.is_sketch_entity(entity)
        )

    @staticmethod
    def parse_sketches(json_obj) -> Dict[str, Sketch]:
        """
        Parse every sketch entity of a reconstruction file, keyed by entity id.

        A sketch whose records are malformed (missing keys, wrong value
        types, non-positive radius) is logged and left out.

        Raises:
            ValueError: if the file is not a JSON object with an entity mapping
        """
        sketches: Dict[str, Sketch] = {}
        for entity_id, entity in Fusion360ReconstructionParser.entities(json_obj).items():
            if not Fusion360ReconstructionParser.is_sketch_entity(entity):
                continue
            try:
                sketches[entity_id] = Fusion360ReconstructionParser.parse_sketch(
                    entity_id, entity
                )
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed sketch {entity_id}: {e!r}")
        return sketches

    @staticmethod
    def parse(json_file_path) -> Dict[str, Sketch]:
        json_obj = Fusion360ReconstructionParser.load_json(json_file_path)
        return Fusion360ReconstructionParser.parse_sketches(json_obj)
