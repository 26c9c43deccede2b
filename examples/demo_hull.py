from cg2d.hull import validate_hull
from cg2d.pipeline import convex_hull, reference_hull

if __name__ == "__main__":
    raw = [
        (0, 0), (1, 1), (2, 0), (1, -1), (1, 0),
        (0.5, 0.5), (1.5, -0.5), (1, 0), (0.2, 0.1),
    ]
    for algo in ("andrew", "jarvis"):
        hull = convex_hull(raw, algorithm=algo)
        print(f"{algo}:", [(p.x, p.y) for p in hull])
        print("VALIDATION:", validate_hull(hull, raw))

    print("scipy:", [(p.x, p.y) for p in reference_hull(raw)])
