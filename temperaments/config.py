from __future__ import annotations
from dataclasses import dataclass, asdict

@dataclass
class ReportSettings:
    decimals: int = 2
    descending: bool = True
    def to_dict(self): return asdict(self)

@dataclass
class GeneratorDefaults:
    ref_frequency: float = 261.625565   # C4
    edo_steps: int = 12
    orwell_steps: int = 9
    orwell_method: str = "calc"
    carlos_preset: str = "a"
