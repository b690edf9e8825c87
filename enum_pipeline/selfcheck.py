from __future__ import annotations

import importlib
from dataclasses import dataclass

from .config import parse_world_config
from .sim import peak, run_world, total_amount


@dataclass
class CheckRow:
    name: str
    ok: bool
    detail: str


@dataclass
class SelfCheckReport:
    rows: list[CheckRow]

    @property
    def ok(self) -> bool:
        return all(row.ok for row in self.rows)

    def to_text(self) -> str:
        lines: list[str] = []
        for row in self.rows:
            status = "OK" if row.ok else "FAIL"
            lines.append(f"[{status}] {row.name}: {row.detail}")
        lines.append(f"overall: {'OK' if self.ok else 'FAIL'}")
        return "\n".join(lines)


def run_selfcheck(*, smoke: bool = True) -> SelfCheckReport:
    rows: list[CheckRow] = []

    for module_name in ("numpy", "yaml"):
        try:
            mod = importlib.import_module(module_name)
            version = getattr(mod, "__version__", "unknown")
            rows.append(CheckRow(module_name, True, f"version={version}"))
        except ImportError as exc:
            rows.append(CheckRow(module_name, False, str(exc)))

    if smoke and all(row.ok for row in rows):
        payload = {
            "world": {
                "Nx": 9,
                "Ny": 9,
                "dt_s": 0.5,
                "diffusivity": 0.2,
                "sources": [{"x": 4, "y": 4, "amount": 1.0}],
            }
        }

        try:
            config = parse_world_config(payload)
            world = run_world(config, ticks=4)
            mass = total_amount(world)
            if abs(mass - 4.0) > 1e-9:
                rows.append(CheckRow("smoke", False, f"mass not conserved: {mass:g} != 4"))
            else:
                value, cell = peak(world)
                rows.append(
                    CheckRow("smoke", True, f"ticks={world.ticks}, peak={value:.4g} at {cell}")
                )
        except Exception as exc:
            rows.append(CheckRow("smoke", False, str(exc)))

    return SelfCheckReport(rows=rows)
