from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from steamid_codec.core.errors import SteamIdParseError
from steamid_codec.core.formatter import IdFormat
from steamid_codec.core.parser import parse
from steamid_codec.core.steam_id import SteamId


DEFAULT_FORMATS = (IdFormat.STEAMID64, IdFormat.STEAMID2, IdFormat.STEAMID3)


@dataclass(frozen=True)
class OutputConfig:
    formats: Tuple[IdFormat, ...] = DEFAULT_FORMATS
    labels: bool = True

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "OutputConfig":
        """
        Build from the ``output`` section of a config file:

          output:
            formats: [steamid64, steamid2, steamid3, url]
            labels: true
        """
        section = (data or {}).get("output") or {}
        if not isinstance(section, dict):
            raise ValueError("Config 'output' must be a mapping")
        names = section.get("formats")
        if names is None:
            formats = DEFAULT_FORMATS
        else:
            if isinstance(names, str) or not isinstance(names, list):
                raise ValueError("Config 'output.formats' must be a list of format names")
            if not names:
                raise ValueError("Config 'output.formats' must not be empty")
            formats = tuple(IdFormat.from_name(str(n)) for n in names)
        return cls(formats=formats, labels=bool(section.get("labels", True)))


@dataclass(frozen=True)
class ConversionResult:
    input: str
    steam_id: Optional[SteamId] = None
    error: Optional[SteamIdParseError] = None

    @property
    def ok(self) -> bool:
        return self.steam_id is not None

    def renderings(self, formats: Tuple[IdFormat, ...]) -> Dict[str, str]:
        if self.steam_id is None:
            return {}
        return {fmt.value: self.steam_id.format(fmt) for fmt in formats}

    def to_dict(self, formats: Tuple[IdFormat, ...]) -> Dict[str, Any]:
        out: Dict[str, Any] = {"input": self.input, "ok": self.ok}
        if self.error is not None:
            out["error"] = self.error.message
        else:
            out.update(self.renderings(formats))
        return out


class Converter:
    def __init__(self, cfg: Optional[OutputConfig] = None) -> None:
        self.cfg = cfg or OutputConfig()

    def convert(self, text: str) -> ConversionResult:
        try:
            return ConversionResult(input=text, steam_id=parse(text))
        except SteamIdParseError as e:
            return ConversionResult(input=text, error=e)

    def render_lines(self, result: ConversionResult) -> list[str]:
        if result.steam_id is None:
            return [f'Unable to parse "{result.input}" reason: \'{result.error}\'']
        lines = []
        for fmt in self.cfg.formats:
            value = result.steam_id.format(fmt)
            lines.append(f"{fmt.label}:\t{value}" if self.cfg.labels else value)
        return lines
