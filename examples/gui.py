# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox, filedialog

from cg2d.io import load_points, uniform_random
from cg2d.pipeline import ALGORITHMS, get_algorithm
from cg2d.progress import HullWorker

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

POLL_MS = 30


class PlotSink:
    """Слухач прогресу, що малює ланцюги / оболонку у вікні."""

    def __init__(self, app: "HullApp"):
        self.app = app

    def on_chains_updated(self, lower, upper) -> None:
        self.app.draw(lower=lower, upper=upper)

    def on_finished(self, hull) -> None:
        self.app.finish(hull)


class HullApp(tk.Tk):
    def __init__(self, points=None, algorithm: str = "andrew", delay: float = 0.08):
        super().__init__()
        self.title("Convex Hull 2D")
        self.geometry("800x700")

        self.points = list(points or [])
        self.worker: HullWorker | None = None
        self._poll_id = None  # відкладений after-виклик _poll
        self.sink = PlotSink(self)

        self.fig = None
        self.ax = None
        self.canvas = None

        self.algorithm = tk.StringVar(value=algorithm)
        self.delay_ms = tk.StringVar(value=str(int(delay * 1000)))

        self._build_widgets()
        self.draw()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Точки ---
        input_frame = ttk.LabelFrame(main, text="Точки")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість випадкових точок:").grid(row=0, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, str(len(self.points) or 200))
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)
        ttk.Button(input_frame, text="Згенерувати", command=self.generate).grid(row=0, column=2, padx=5)
        ttk.Button(input_frame, text="Завантажити файл…", command=self.open_file).grid(row=0, column=3, padx=5)

        # --- Алгоритм ---
        algo_frame = ttk.LabelFrame(main, text="Алгоритм")
        algo_frame.pack(fill="x", pady=5)
        for col, name in enumerate(sorted(ALGORITHMS)):
            ttk.Radiobutton(algo_frame, text=name, variable=self.algorithm, value=name).grid(
                row=0, column=col, sticky="w", padx=5, pady=2
            )
        ttk.Label(algo_frame, text="Пауза, мс:").grid(row=0, column=3, sticky="e", padx=5)
        ttk.Entry(algo_frame, textvariable=self.delay_ms, width=6).grid(row=0, column=4, sticky="w")

        # --- Кнопки ---
        btns = ttk.Frame(main)
        btns.pack(fill="x", pady=5)
        self.run_btn = ttk.Button(btns, text="Запустити анімацію", command=self.start)
        self.run_btn.pack(side="left", expand=True, fill="x", padx=2)
        self.cancel_btn = ttk.Button(btns, text="Скасувати", command=self.cancel, state="disabled")
        self.cancel_btn.pack(side="left", expand=True, fill="x", padx=2)

        self.status_var = tk.StringVar(value="—")
        ttk.Label(main, textvariable=self.status_var).pack(fill="x")

        # --- Графік ---
        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)
        self.fig = Figure(figsize=(5, 4))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    # ---------------- Точки ----------------
    def generate(self):
        try:
            n = int(self.n_entry.get())
            if n < 0:
                raise ValueError
        except ValueError:
            messagebox.showerror("Помилка", "Кількість точок має бути невід’ємним цілим числом.")
            return
        self.points = uniform_random(n)
        self.draw()

    def open_file(self):
        path = filedialog.askopenfilename(filetypes=[("Point files", "*.txt"), ("All files", "*")])
        if not path:
            return
        try:
            self.points = load_points(path)
        except (OSError, ValueError) as e:
            messagebox.showerror("Помилка читання точок", str(e))
            return
        self.draw()

    # ---------------- Анімація ----------------
    def start(self):
        self.cancel()
        if self._poll_id is not None:
            # старий цикл опитування не повинен читати чергу нового worker
            self.after_cancel(self._poll_id)
            self._poll_id = None
        try:
            delay = max(0, int(self.delay_ms.get())) / 1000.0
        except ValueError:
            messagebox.showerror("Помилка", "Пауза має бути цілим числом мілісекунд.")
            return
        algo = get_algorithm(self.algorithm.get())
        self.worker = HullWorker(algo, self.points, delay=delay)
        self.worker.start()
        self.run_btn.configure(state="disabled")
        self.cancel_btn.configure(state="normal")
        self.status_var.set(f"{algo.name}: будуємо…")
        self._poll_id = self.after(POLL_MS, self._poll)

    def cancel(self):
        if self.worker is not None and self.worker.is_alive():
            self.worker.cancel()

    def _poll(self):
        self._poll_id = None
        if self.worker is None:
            return
        if not self.worker.poll(self.sink):
            self._poll_id = self.after(POLL_MS, self._poll)

    def finish(self, hull):
        cancelled = self.worker is not None and self.worker.cancelled
        self.run_btn.configure(state="normal")
        self.cancel_btn.configure(state="disabled")
        if cancelled:
            self.status_var.set("Скасовано")
            self.draw()
            return
        self.status_var.set(f"Готово: {len(hull)} вершин оболонки з {len(self.points)} точок")
        self.draw(hull=hull)

    def draw(self, lower=(), upper=(), hull=()):
        """Перемалювати точки, поточні ланцюги і (якщо є) фінальну оболонку."""
        self.ax.clear()
        if self.points:
            self.ax.scatter([p.x for p in self.points], [p.y for p in self.points], s=8, color="gray")
        if lower:
            self.ax.plot([p.x for p in lower], [p.y for p in lower], "-o", color="tab:blue", markersize=3)
        if upper:
            self.ax.plot([p.x for p in upper], [p.y for p in upper], "-o", color="tab:orange", markersize=3)
        if hull:
            closed = list(hull) + [hull[0]]
            self.ax.plot([p.x for p in closed], [p.y for p in closed], "-", color="tab:green", linewidth=2)
        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.set_xlabel("X")
        self.ax.set_ylabel("Y")
        self.canvas.draw()


if __name__ == "__main__":
    app = HullApp(points=uniform_random(200))
    app.mainloop()
