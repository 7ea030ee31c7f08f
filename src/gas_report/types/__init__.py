from .compiler import CompilerInfo
from .gas import DeploymentRecord, GasSnapshot, MethodRecord
from .options import ReportOptions
from .render import ColorLevel, RenderContext, ReportStyles

__all__ = [
    "ColorLevel",
    "CompilerInfo",
    "DeploymentRecord",
    "GasSnapshot",
    "MethodRecord",
    "RenderContext",
    "ReportOptions",
    "ReportStyles",
]
