#!/usr/bin/env python3
"""
Basic Usage Example - Chrono Axis Layout Engine

This script demonstrates the basic usage of the chrono axis engine. It shows
how to:
- Plan ticks for a fixed range and format their labels
- Map instants to pixels and back
- Let an auto-ranging axis derive its range from data
- Plug in a custom label formatter

Run: python examples/basic_usage.py
"""

from datetime import datetime, timezone

from chrono_axis.axis import TimeAxis
from chrono_axis.logging import configure_logging
from chrono_axis.mapping import RangeMapper
from chrono_axis.ticks.planner import TickPlanner
from chrono_axis.utils.time import format_instant, to_instant


def ms(*args: int) -> int:
    """Instant for a UTC calendar date."""
    return to_instant(datetime(*args, tzinfo=timezone.utc))


def demo_fixed_range() -> None:
    """Plan and label ticks for a fixed range."""
    print("\n=== Fixed range ===")
    planner = TickPlanner()

    lower, upper = ms(2013, 12, 25), ms(2016, 1, 1)
    plan = planner.plan(lower, upper, axis_length=300)

    print(f"Selected interval: {plan.selected_interval} ({len(plan)} ticks)")
    for tick, label in zip(plan.ticks, planner.format_plan(plan)):
        print(f"  {format_instant(tick.instant)} -> {label!r}  key={tick.key}")


def demo_mapping() -> None:
    """Map instants to pixels and back."""
    print("\n=== Mapping ===")
    mapper = RangeMapper(ms(2020, 1, 1), ms(2020, 1, 2), axis_length=960)

    noon = ms(2020, 1, 1, 12)
    pixel = mapper.map_to_pixel(noon)
    print(f"Noon is at pixel {pixel:.1f}")
    print(f"Pixel 240 shows {format_instant(mapper.map_from_pixel(240))}")

    vertical = RangeMapper(mapper.lower, mapper.upper, axis_length=480, vertical=True)
    print(f"On a 480px vertical axis noon is at y={vertical.map_to_pixel(noon):.1f}")


def demo_auto_ranging() -> None:
    """Derive the range from data, including the single-point case."""
    print("\n=== Auto-ranging ===")
    axis = TimeAxis()

    axis.invalidate_range([ms(2024, 3, 1, 9), ms(2024, 3, 1, 17, 30), ms(2024, 3, 1, 12)])
    layout = axis.layout(axis_length=800)
    print(f"Working day: {layout.selected_interval}")
    for _tick, position, label in layout.entries():
        print(f"  {position:7.1f}px  {label}")

    axis.invalidate_range([ms(2020, 6, 1, 12)])
    layout = axis.layout(axis_length=800)
    current = axis.current_range
    print(f"Single point padded to {current.span} ms, {len(layout.plan)} ticks")


def demo_custom_formatter() -> None:
    """Override labels for every tick."""
    print("\n=== Custom formatter ===")
    axis = TimeAxis(
        ms(2024, 1, 1),
        ms(2024, 12, 31),
        tick_label_formatter=lambda value: value.strftime("%d.%m.%Y"),
    )
    print(list(axis.layout(axis_length=600).labels))


def main() -> None:
    configure_logging(level="INFO")
    demo_fixed_range()
    demo_mapping()
    demo_auto_ranging()
    demo_custom_formatter()


if __name__ == "__main__":
    main()
