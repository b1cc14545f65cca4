"""Basic Prismath usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import math

import numpy as np

from prismath import Color, FormatType, Vector, fmath


def demonstrate_vectors() -> None:
    # In-place arithmetic chains; class-level calls leave their operands alone.
    position = Vector(1, 2)
    velocity = Vector(0.5, -0.25, 1)
    position.add(velocity).mult(2)
    print("Moved position:", position)

    midpoint = Vector.lerp(Vector(0, 0, 0), position, 0.5)
    print("Midpoint:", midpoint, "distance:", Vector.dist(midpoint, position))
    print("Unit direction:", velocity.normalized)


def demonstrate_colors() -> None:
    # Packed colors with RGB, hex and HSL views.
    accent = Color.from_rgb(255, 128, 64)
    print("Accent hex:", accent.hex.hex)
    print("Accent HSL (percent):", accent.hsl)
    print("Accent HSL (int):", accent.to_hsl(FormatType.INT))

    teal = Color.from_hsl(180, 60, 40)
    print("Teal from HSL:", teal.rgb)

    shorthand = Color.from_hex("#0f08")
    print("Shorthand hex:", shorthand, "alpha", shorthand.alpha)


def demonstrate_scalar_math() -> None:
    rng = np.random.default_rng(2024)
    print("Random colors:", [
        Color.from_rgb(*(fmath.rand_int(0, 255, rng=rng) for _ in range(3))).to_hex(False)
        for _ in range(3)
    ])
    print("Snap 17 to 5:", fmath.round_to(17, 5), "ceil:", fmath.round_to(17, 5, math.ceil))
    print("Map 0.25 onto 0..360:", fmath.map_range(0.25, 0, 1, 0, 360))
    print("Vectorized map:", fmath.np_map_range(np.linspace(0, 1, 5), 0, 1, 0, 360))


if __name__ == "__main__":
    demonstrate_vectors()
    demonstrate_colors()
    demonstrate_scalar_math()
