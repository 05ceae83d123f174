"""Validated layout configuration with pure merging."""

from dataclasses import dataclass, fields, replace

from masonrygrid.layout.masonry_layout import ALIGN_CENTER, ALIGNMENTS, LayoutParams
from masonrygrid.utils.flow_log import log_flow

_NON_NEGATIVE_FIELDS = ("offset", "item_width", "flexible_width", "resize_delay")


@dataclass(frozen=True)
class LayoutConfig:
    """User facing options; `auto_resize` and `resize_delay` drive the resize wiring only."""

    align: str = ALIGN_CENTER
    offset: int = 2
    item_width: int = 0
    flexible_width: int = 0
    auto_resize: bool = False
    resize_delay: int = 50

    def to_params(self, container_width: int) -> LayoutParams:
        return LayoutParams(
            item_width=self.item_width,
            flexible_width=self.flexible_width,
            offset=self.offset,
            align=self.align,
            container_width=max(0, int(container_width)),
        )


def validate_config(config: LayoutConfig) -> LayoutConfig:
    """Clamp negative sizes to 0 and unknown alignments to center."""
    changes = {}
    for name in _NON_NEGATIVE_FIELDS:
        value = getattr(config, name)
        if value < 0:
            log_flow("MASONRY", f"Clamped {name}={value} to 0", level="WARNING")
            changes[name] = 0

    align = str(config.align).strip().lower()
    if align not in ALIGNMENTS:
        log_flow("MASONRY", f"Unknown align={config.align!r}, using {ALIGN_CENTER}", level="WARNING")
        align = ALIGN_CENTER
    if align != config.align:
        changes["align"] = align

    return replace(config, **changes) if changes else config


def merge_config(config: LayoutConfig, **partial) -> LayoutConfig:
    """Return a new validated config with `partial` applied on top of `config`."""
    known = {f.name for f in fields(LayoutConfig)}
    unknown = set(partial) - known
    if unknown:
        raise TypeError(f"Unknown layout option(s): {', '.join(sorted(unknown))}")
    return validate_config(replace(config, **partial))

