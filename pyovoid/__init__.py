"""
pyovoid: closed triangle meshes of ovoid solids of revolution.

A profile curve is sampled in its meridian plane, revolved about an axis into
rings, triangulated as a quad strip and welded into a manifold mesh.
"""

from .errors import (
    DegenerateGrid,
    InvalidCurveParameter,
    InvalidOptionType,
    InvalidSampleCount,
    InvalidTolerance,
    MeshNotClosed,
    OvoidError,
    TooManyArguments,
)
from .ovoid import OvoidMesh, generate_ovoid_mesh, mesh_ovoid, parse_arguments
from .profile import (
    FAMILIES,
    CompositeArcFamily,
    CurveFamily,
    EggCurveFamily,
    ExpressionFamily,
    ProfilePoint,
)
from .export import save_mesh, save_obj, save_ply_ascii, save_stl_binary

__version__ = "0.1.0"

__all__ = [
    "CompositeArcFamily",
    "CurveFamily",
    "DegenerateGrid",
    "EggCurveFamily",
    "ExpressionFamily",
    "FAMILIES",
    "InvalidCurveParameter",
    "InvalidOptionType",
    "InvalidSampleCount",
    "InvalidTolerance",
    "MeshNotClosed",
    "OvoidError",
    "OvoidMesh",
    "ProfilePoint",
    "TooManyArguments",
    "generate_ovoid_mesh",
    "mesh_ovoid",
    "parse_arguments",
    "save_mesh",
    "save_obj",
    "save_ply_ascii",
    "save_stl_binary",
]
