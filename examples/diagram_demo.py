"""
Example drawing a climate diagram from the computed geometry.
"""

import matplotlib.pyplot as plt
from matplotlib.collections import PolyCollection

from py_climate_diagram.config import DiagramSettings
from py_climate_diagram.core import ChartDataStore, Month, MonthlyEntry, SeriesKind, rebuild
from py_climate_diagram.core.series import parse_entry


def main():
    # Sample data with a wetter summer typed in as text
    store = ChartDataStore(location_name="Sample Station")
    store.set_location_height("113")
    store.apply_entries([
        MonthlyEntry(Month.JUNE, SeriesKind.PRECIPITATION, parse_entry("140,5")),
        MonthlyEntry(Month.JULY, SeriesKind.PRECIPITATION, parse_entry("")),
    ])

    settings = DiagramSettings(width=400, height=600)
    diagram = rebuild(store, settings)

    print(f"Scale: {diagram.scale.num_steps} steps from {diagram.scale.lowest_step * 10}°C")
    print(f"Average temperature: {diagram.labels.temperature_text}")
    print(f"Total precipitation: {diagram.labels.precipitation_text}")

    fig, ax = plt.subplots(figsize=(6, 8))

    # Areas
    colors = {"humid": "#4a90d9", "dry": "#f2c14e", "very_humid": "#1f3f8f"}
    for kind, mesh in diagram.meshes.items():
        if mesh.is_empty:
            continue
        ax.add_collection(PolyCollection(mesh.vertices[mesh.triangles], facecolors=colors[kind.value]))

    # Value axis
    for tick in diagram.ticks:
        ax.plot([tick.start_x, tick.end_x], [tick.y, tick.y], color="0.25", linewidth=tick.line_width)
        ax.text(0, tick.y, str(tick.temperature_label), ha="right", va="center", color="red")
        ax.text(settings.width, tick.y, str(tick.precipitation_label), ha="left", va="center", color="blue")

    # Month axes
    for start, end in diagram.month_axes:
        ax.plot([start.x, end.x], [start.y, end.y], color="0.6", linewidth=0.5)

    # Curves
    temps = diagram.temperature_line.vertices
    precs = diagram.precipitation_line.vertices
    ax.plot(temps[:, 0], temps[:, 1], color="red", marker="o")
    ax.plot(precs[:, 0], precs[:, 1], color="blue")
    points = diagram.precipitation_line.month_vertices
    ax.scatter(points[:, 0], points[:, 1], color="blue")

    ax.set_title(diagram.labels.location)
    ax.set_xlim(-40, settings.width + 40)
    ax.set_aspect("equal")
    ax.axis("off")

    plt.tight_layout()
    plt.savefig("climate_diagram.png", dpi=150)
    print("\nClimate diagram saved to climate_diagram.png")


if __name__ == "__main__":
    main()
