from typing import Any, Mapping, Optional

from pydantic import BaseModel

_UNSET = "----"


class CompilerInfo(BaseModel):
    """
    Display values for the compiler that built the measured contracts.
    """

    version: str = "unknown"
    optimizer: str = _UNSET
    via_ir: bool = False
    runs: str = _UNSET

    @classmethod
    def from_settings(cls, config: Optional[Mapping[str, Any]]) -> "CompilerInfo":
        """
        Read a solc-style compiler entry, e.g.
        ``{"version": "0.8.24", "settings": {"optimizer": {"enabled": True, "runs": 200}}}``.
        """
        if not config:
            return cls()

        settings = config.get("settings") or {}
        optimizer = settings.get("optimizer")
        return cls(
            version=str(config.get("version") or "unknown"),
            optimizer=_display(optimizer.get("enabled")) if optimizer else _UNSET,
            runs=_display(optimizer.get("runs")) if optimizer else _UNSET,
            via_ir=bool(settings.get("viaIR", False)),
        )


def _display(value: Any) -> str:
    if value is None:
        return _UNSET
    elif isinstance(value, bool):
        return str(value).lower()

    return str(value)
