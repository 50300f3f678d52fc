import math
import random
from dataclasses import dataclass

from pyinstrument import Profiler

from vec2d import Vec2, linalg


@dataclass
class Body:
    x: float
    y: float


def make_bodies(n, seed=1):
    rng = random.Random(seed)
    return [Body(rng.uniform(-100, 100), rng.uniform(-100, 100)) for _ in range(n)]


def step(bodies, normal, dt):
    out = []
    for b in bodies:
        v = Vec2.from_vector(b)
        v.rotate_radians(dt)
        r = linalg.reflect(v, normal)
        out.append(linalg.lerp(b, r, 0.5))
    return out


def benchmark_large():
    bodies = make_bodies(10_000)
    normal = Vec2(math.cos(0.3), math.sin(0.3))

    profiler = Profiler()
    profiler.start()

    N = 10
    print(f"Starting computation ({N} iterations over {len(bodies)} bodies)...")
    for _ in range(N):
        bodies = step(bodies, normal, 0.01)
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("vec2d_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_large()
