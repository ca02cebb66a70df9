from .types import NonRealValueError
from .numbers import (
    EQUAL_EPSILON,
    ZERO_EPSILON,
    clamp,
    degrees_to_radians,
    human_format,
    is_equal,
    is_zero,
    maximum,
    minimum,
    normalize_radians,
    radians_to_degrees,
)
from .polynomials import Constant, Linear, Quadratic, Cubic, Quartic, is_equal_equations
from .points import (
    ORIGIN,
    POINT_NAN,
    VECTOR_NAN,
    VECTOR_ZERO,
    Point,
    Quadrant,
    Vector,
    is_equal_pair,
    is_zero_pair,
    limits_points,
    rotate_points,
    scale_points,
    shear_points,
    sort_points,
    translate_points,
)
from .lines import (
    LINE_X_AXIS,
    LINE_Y_AXIS,
    Line,
    Ray,
    Segment,
    SlopeType,
    filter_points_on_ray,
    is_equal_points,
    rotate_or_translate_to_x_axis,
)
from .shapes import SQUARE, TRIANGLE_EQUILATERAL, Circle, Polygon, Rectangle, clip_segment_to_rectangle
from .curves import (
    Bezier,
    BezierCurveType,
    ParamCurve,
    param_cubic,
    param_linear,
    param_quadratic,
    param_quartic,
)
from .config import IntersectionConfig, get_intersection_config, set_intersection_config
from .intersection import (
    intersection_bezier_bezier,
    intersection_line_bezier,
    intersection_line_line,
    intersection_line_ray,
    intersection_line_segment,
    intersection_polygon_segment,
    intersection_ray_ray,
    intersection_rectangle_line,
    intersection_rectangle_rectangle,
    intersection_rectangle_segment,
    intersection_segment_bezier,
    intersection_segment_ray,
    intersection_segment_segment,
)

__all__ = [
    'NonRealValueError',
    'ZERO_EPSILON',
    'EQUAL_EPSILON',
    'is_zero',
    'is_equal',
    'clamp',
    'minimum',
    'maximum',
    'human_format',
    'normalize_radians',
    'degrees_to_radians',
    'radians_to_degrees',
    'Constant',
    'Linear',
    'Quadratic',
    'Cubic',
    'Quartic',
    'is_equal_equations',
    'Point',
    'Vector',
    'Quadrant',
    'ORIGIN',
    'POINT_NAN',
    'VECTOR_ZERO',
    'VECTOR_NAN',
    'rotate_points',
    'translate_points',
    'scale_points',
    'shear_points',
    'limits_points',
    'sort_points',
    'is_equal_pair',
    'is_zero_pair',
    'SlopeType',
    'Line',
    'LINE_X_AXIS',
    'LINE_Y_AXIS',
    'Ray',
    'Segment',
    'rotate_or_translate_to_x_axis',
    'filter_points_on_ray',
    'is_equal_points',
    'Polygon',
    'Rectangle',
    'Circle',
    'SQUARE',
    'TRIANGLE_EQUILATERAL',
    'clip_segment_to_rectangle',
    'ParamCurve',
    'param_linear',
    'param_quadratic',
    'param_cubic',
    'param_quartic',
    'Bezier',
    'BezierCurveType',
    'IntersectionConfig',
    'get_intersection_config',
    'set_intersection_config',
    'intersection_line_line',
    'intersection_line_ray',
    'intersection_line_segment',
    'intersection_line_bezier',
    'intersection_ray_ray',
    'intersection_segment_ray',
    'intersection_segment_segment',
    'intersection_segment_bezier',
    'intersection_rectangle_line',
    'intersection_rectangle_segment',
    'intersection_rectangle_rectangle',
    'intersection_polygon_segment',
    'intersection_bezier_bezier',
]
