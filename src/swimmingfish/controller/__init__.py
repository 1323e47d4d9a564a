from swimmingfish.controller.phase_driver import PhaseDriver, phase_at
from swimmingfish.controller.composer import FrameComposer, FrameAnchors, InvalidSurfaceError
