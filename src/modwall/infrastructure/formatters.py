"""Output formatters and exporters for wall layouts."""

from __future__ import annotations

import json
from typing import Any

from modwall.application.dtos import LayoutOutput
from modwall.domain import (
    AccessoryCompatibility,
    AccessoryPlacement,
    AttachmentCheck,
    LayoutWarning,
    ModuleLayout,
    ModuleType,
    SceneMapper,
    SnapPoint,
    WallModule,
)

# Short labels drawn inside module boxes
_TYPE_LABELS: dict[ModuleType, str] = {
    ModuleType.STANDARD: "",
    ModuleType.TV: "TV",
    ModuleType.FIRE: "FIRE",
    ModuleType.GAMING: "GAME",
}


class ModuleTableFormatter:
    """Formats the module list of a layout as a table."""

    def format(self, layout: ModuleLayout) -> str:
        """Format modules with position, size and what each can host."""
        compatibility = AccessoryCompatibility(layout)
        lines = [
            "MODULE LAYOUT",
            "=" * 78,
            f"{'Module':<10} {'Type':<9} {'Width':<7} {'Height':<7} {'Position':<10} Capabilities",
            "-" * 78,
        ]

        for module in layout.modules:
            tooltip = compatibility.module_tooltip(module.id)
            capabilities = tooltip.split(" – ", 1)[-1]
            lines.append(
                f"{module.id:<10} {module.type.value:<9} {module.width:<7} "
                f"{module.height:<7} {module.position:<10g} {capabilities}"
            )

        lines.append("-" * 78)
        lines.append(
            f"{'TOTAL':<10} {len(layout)} modules, {layout.total_module_width}mm "
            f"of {layout.usable_width}mm usable"
        )
        if layout.gap:
            lines.append(f"{'':<10} {layout.gap}mm uncovered")

        if layout.info is not None:
            lines.append("")
            lines.extend(layout.info.lines())

        return "\n".join(lines)


class LayoutDiagramFormatter:
    """Formats ASCII elevation diagrams of wall layouts."""

    def format(
        self,
        layout: ModuleLayout,
        total_width: int,
        width: int = 72,
        height: int = 9,
    ) -> str:
        """Generate an ASCII front view of the wall.

        Module boundaries are scaled from millimeters to characters, so
        narrow modules may share a column with their neighbor.
        """
        if not layout.modules:
            return "No modules to display."

        lines = [
            "WALL LAYOUT DIAGRAM",
            "=" * width,
            "",
        ]

        grid = [[" " for _ in range(width)] for _ in range(height)]
        scale = (width - 1) / total_width

        for module in layout.modules:
            x1 = int(round(module.position * scale))
            x2 = int(round(module.right_edge * scale))
            x2 = max(x2, x1 + 1)
            self._draw_box(grid, x1, 0, min(x2, width - 1), height - 1)
            self._draw_label(grid, module, x1, x2, height)

        for row in grid:
            lines.append("".join(row))

        lines.append("")
        lines.append(
            f"Wall: {total_width}mm, usable {layout.usable_width}mm, "
            f"{len(layout)} modules"
        )
        return "\n".join(lines)

    def _draw_label(
        self,
        grid: list[list[str]],
        module: WallModule,
        x1: int,
        x2: int,
        height: int,
    ) -> None:
        """Write the module's type and width inside its box if it fits."""
        inner = x2 - x1 - 1
        rows = [_TYPE_LABELS[module.type], str(module.width)]
        mid = height // 2
        for offset, text in enumerate(rows):
            if not text or len(text) > inner:
                continue
            y = mid - 1 + offset
            start = x1 + 1 + (inner - len(text)) // 2
            for i, char in enumerate(text):
                grid[y][start + i] = char

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        """Draw a box on the grid."""
        grid[y1][x1] = "+"
        grid[y1][x2] = "+"
        grid[y2][x1] = "+"
        grid[y2][x2] = "+"

        for x in range(x1 + 1, x2):
            grid[y1][x] = "-"
            grid[y2][x] = "-"

        for y in range(y1 + 1, y2):
            grid[y][x1] = "|"
            grid[y][x2] = "|"


class PlacementFormatter:
    """Formats accessory placements, snap points and attachment checks."""

    def format(self, placements: list[AccessoryPlacement]) -> str:
        """Format resolved accessory placements as a table."""
        if not placements:
            return "No accessories placed."

        lines = [
            "ACCESSORY PLACEMENTS",
            "=" * 60,
            f"{'Accessory':<16} {'Module':<10} {'X':>8} {'Y':>8} {'Z':>8}",
            "-" * 60,
        ]
        for placement in placements:
            point = placement.snap_point
            lines.append(
                f"{placement.label:<16} {placement.module_id:<10} "
                f"{point.wall_x:>8g} {point.y:>8g} {point.z:>8g}"
            )
        return "\n".join(lines)

    def format_snap_points(self, accessory: str, points: tuple[SnapPoint, ...]) -> str:
        """Format the snap points of one accessory in module-local mm."""
        if not points:
            return f"No module can host {accessory}."

        lines = [
            f"SNAP POINTS: {accessory}",
            "=" * 50,
            f"{'Module':<10} {'X':>8} {'Y':>8} {'Z':>8} {'Wall X':>10}",
            "-" * 50,
        ]
        for point in points:
            lines.append(
                f"{point.module_id:<10} {point.x:>8g} {point.y:>8g} "
                f"{point.z:>8g} {point.wall_x:>10g}"
            )
        return "\n".join(lines)

    def format_check(self, module_id: str, accessory: str, check: AttachmentCheck) -> str:
        """Format the result of an attachment check."""
        if check.valid:
            return f"{accessory} can attach to {module_id}"
        return f"{accessory} cannot attach to {module_id}: {check.reason}"


class WarningFormatter:
    """Formats layout warnings for display."""

    def format(self, warnings: list[LayoutWarning]) -> str:
        if not warnings:
            return ""
        lines = ["Warnings:"]
        for warning in warnings:
            lines.append(f"  - [{warning.code}] {warning.message}")
        return "\n".join(lines)


class JsonLayoutFormatter:
    """Exports layout output as JSON.

    Module and snap point positions are given both in wall millimeters and
    as scene coordinates in meters, centered on the wall.
    """

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as JSON string."""
        return json.dumps(self.to_dict(output), indent=2, ensure_ascii=False)

    def to_dict(self, output: LayoutOutput) -> dict[str, Any]:
        if not output.is_valid or output.layout is None or output.configuration is None:
            return {"errors": output.errors}

        configuration = output.configuration
        layout = output.layout
        mapper = SceneMapper(configuration.total_width)

        return {
            "wall": {
                "width": configuration.total_width,
                "height": configuration.total_height,
                "usable_width": configuration.usable_width,
                "margin_per_side": configuration.margin_per_side,
                "special": configuration.special_request.value,
                "finish": {
                    "category": configuration.finish.category.value,
                    "color": configuration.finish.color,
                    "texture": configuration.finish.texture,
                },
                "installation": configuration.installation.value,
            },
            "modules": [self._format_module(m, mapper) for m in layout.modules],
            "placements": [
                self._format_placement(p, mapper) for p in output.placements
            ],
            "layout_info": layout.info.lines() if layout.info else [],
            "warnings": [
                {"code": w.code, "message": w.message, "gap": w.gap}
                for w in output.warnings
            ],
        }

    def _format_module(self, module: WallModule, mapper: SceneMapper) -> dict[str, Any]:
        center = mapper.module_center(module)
        width_m, height_m = mapper.module_size(module)
        return {
            "id": module.id,
            "type": module.type.value,
            "width": module.width,
            "height": module.height,
            "position": module.position,
            "scene": {
                "x": center.x,
                "y": center.y,
                "z": center.z,
                "width": width_m,
                "height": height_m,
            },
        }

    def _format_placement(
        self, placement: AccessoryPlacement, mapper: SceneMapper
    ) -> dict[str, Any]:
        point = placement.snap_point
        scene = mapper.snap_point(point)
        return {
            "label": placement.label,
            "accessory": placement.accessory.value,
            "module_id": placement.module_id,
            "snap_point": {"x": point.x, "y": point.y, "z": point.z},
            "scene": {"x": scene.x, "y": scene.y, "z": scene.z},
        }
