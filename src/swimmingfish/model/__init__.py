from swimmingfish.model.geometry_primitives import Point, MoveTo, LineTo, QuadTo, Path
from swimmingfish.model.geometry_utils import project
from swimmingfish.model.body_plan import BodyPlan
from swimmingfish.model.paint import Color, PaintState, ResolvedPaint, TintFilter, LightingFilter
from swimmingfish.model.shapes import FillCircle, FillPath, DrawCommand, ShapeKind
