# examples/demo_steps.py
from cg2d.pipeline import hull_steps

if __name__ == "__main__":
    square = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 0), (1, 1), (0, 1)]

    for algo in ("andrew", "jarvis"):
        print(f"--- {algo} ---")
        for i, step in enumerate(hull_steps(square, algorithm=algo)):
            lower, upper = step.chains()
            if step.terminal:
                print(f"{i:3d} finished: {[(p.x, p.y) for p in step.hull]}")
            else:
                print(f"{i:3d} {step.kind.value:5s} {step.point}  lower={len(lower)} upper={len(upper)}")
