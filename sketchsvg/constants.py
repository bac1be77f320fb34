import math

LINE_TYPE = "Line3D"
ARC_TYPE = "Arc3D"
CIRCLE_TYPE = "Circle3D"
SUPPORTED_CURVE_TYPES = [LINE_TYPE, ARC_TYPE, CIRCLE_TYPE]

SKETCH_ENTITY_TYPE = "Sketch"

TOLERANCE = 1e-6  # endpoint matching distance used when chaining loops
DEFAULT_DILATION = 0.1  # viewport margin as a fraction of (width + height) / 2
STROKE_WIDTH_DIVISOR = 200

# circles are emitted as two half arcs, a single arc command cannot close on itself
CIRCLE_SPLITS = [(0.0, math.pi), (math.pi, 2 * math.pi)]

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_VERSION = "1.1"
