"""Basic complexcolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from complexcolor import (
    complex_color,
    colormap,
    half_open_range,
    plot_data,
    sample_grid,
    save_image,
    septaphase,
)


def demonstrate_colors() -> None:
    # The origin and three points of the unit circle.
    field = np.array([[0, 1j], [-1, -1j]])
    print("HSL colors:\n", complex_color(field))
    print("OKLCH colors:\n", complex_color(field, "oklch"))


def demonstrate_rendering(output_dir: str = ".") -> None:
    # A rational function with two zeros and two poles.
    x = half_open_range(-2, 2, 400)
    y = half_open_range(-2, 2, 400)
    field = sample_grid(lambda z: (z ** 2 - 1) / (z ** 2 + 1), x, y)

    save_image(complex_color(field), f"{output_dir}/rational_hsl.png")
    save_image(complex_color(field, "oklch"), f"{output_dir}/rational_oklch.png")
    save_image(complex_color(field, discontinuous=True), f"{output_dir}/rational_banded.png")

    variants = septaphase(field, "oklch")
    for name, image in variants._asdict().items():
        save_image(image, f"{output_dir}/rational_septaphase_{name}.png")


def demonstrate_plot_data() -> None:
    x = half_open_range(-1, 1, 50)
    y = half_open_range(-1, 1, 60)
    data = plot_data(x, y, sample_grid(np.exp, x, y), title="exp(z)")
    print("image shape:", data.image.shape)
    print("x tick positions:", data.xticks.positions)
    print("modulus levels:", data.modulus_levels[:4], "...")
    print("colormap entries:", len(colormap(data.mode)))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_rendering()
    demonstrate_plot_data()
