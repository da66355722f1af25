"""Viewport pipeline: camera control, projection and pointer mapping."""

from mapscope.view.camera import Camera, CameraController, clamp, compute_bounds
from mapscope.view.viewport import RulerSpec, ViewportConfig, ViewportProjector
from mapscope.view.pointer import EditAction, OutsideDrawable, PointerMapper, WorldPoint, apply_edit

__all__ = [
    "Camera",
    "CameraController",
    "clamp",
    "compute_bounds",
    "RulerSpec",
    "ViewportConfig",
    "ViewportProjector",
    "EditAction",
    "OutsideDrawable",
    "PointerMapper",
    "WorldPoint",
    "apply_edit",
]
