# cg2d/progress.py
from __future__ import annotations
import logging
import queue
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional, Protocol, Sequence, Tuple

from .geom import Pt

if TYPE_CHECKING:
    from .hull import ConvexHullAlgorithm

logger = logging.getLogger(__name__)

Chain = Tuple[Pt, ...]


class StepKind(Enum):
    PUSH = "push"          # точку додано в ланцюг
    POP = "pop"            # точку знято з ланцюга (порушувала опуклість)
    WRAP = "wrap"          # gift wrapping вибрав наступну вершину
    FINISHED = "finished"  # фінальний крок із готовою оболонкою


@dataclass(frozen=True)
class Step:
    """
    Один спостережуваний крок побудови.
    lower/upper: знімки ланцюгів монотонного ланцюга (кортежі-копії, а не живий стан).
    hull: часткова оболонка (WRAP) або фінальна (FINISHED).
    point: точка, яку щойно додали / зняли / вибрали.
    """
    kind: StepKind
    lower: Chain = ()
    upper: Chain = ()
    hull: Chain = ()
    point: Optional[Pt] = None
    cancelled: bool = False

    @property
    def terminal(self) -> bool:
        return self.kind is StepKind.FINISHED

    def chains(self) -> Tuple[Chain, Chain]:
        """Пара (lower, upper) для слухача; у gift wrapping єдиний «ланцюг» це часткова оболонка."""
        if self.kind is StepKind.WRAP:
            return self.hull, ()
        return self.lower, self.upper


class ProgressSink(Protocol):
    def on_chains_updated(self, lower: Sequence[Pt], upper: Sequence[Pt]) -> None: ...
    def on_finished(self, hull: Sequence[Pt]) -> None: ...


def drive(steps: Iterable[Step], sink: ProgressSink) -> List[Pt]:
    """
    Прогнати потік кроків у слухача:
      - кожен нетермінальний крок -> on_chains_updated,
      - термінальний -> on_finished (рівно один раз).
    Повертає фінальну оболонку.
    """
    for step in steps:
        if step.terminal:
            hull = list(step.hull)
            sink.on_finished(hull)
            return hull
        lower, upper = step.chains()
        sink.on_chains_updated(lower, upper)
    # потік обірвався без FINISHED: для слухача це скасування
    sink.on_finished([])
    return []


class HullWorker(threading.Thread):
    """
    Запускає алгоритм у фоновому потоці й складає кроки в чергу.
    Споживач (наприклад, UI-цикл tkinter) забирає їх через poll(sink) у своєму потоці.
    delay: пауза між кроками для анімації, на результат не впливає.
    """

    def __init__(self, algorithm: "ConvexHullAlgorithm", points: Sequence, delay: float = 0.0):
        super().__init__(name=f"hull-{algorithm.name}", daemon=True)
        self.algorithm = algorithm
        self.points = list(points)
        self.delay = delay
        self.steps: "queue.Queue[Step]" = queue.Queue()
        self._cancel = threading.Event()
        self._finished_delivered = False

    def cancel(self) -> None:
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def run(self) -> None:
        try:
            for step in self.algorithm.steps(self.points, cancel=self._cancel):
                self.steps.put(step)
                if self.delay > 0 and not step.terminal:
                    time.sleep(self.delay)
        except Exception:
            logger.exception("%s worker failed", self.algorithm.name)
            self.steps.put(Step(StepKind.FINISHED, cancelled=True))

    def poll(self, sink: ProgressSink, latest_only: bool = True) -> bool:
        """
        Доставити накопичені кроки слухачу. latest_only: з пачки проміжних кроків
        показати лише останній (як це робить анімація). Повертає True, коли on_finished вже викликано.
        """
        if self._finished_delivered:
            return True
        pending: List[Step] = []
        while True:
            try:
                pending.append(self.steps.get_nowait())
            except queue.Empty:
                break
        last_chain: Optional[Step] = None
        for step in pending:
            if step.terminal:
                if last_chain is not None:
                    sink.on_chains_updated(*last_chain.chains())
                    last_chain = None
                sink.on_finished(list(step.hull))
                self._finished_delivered = True
                break
            if latest_only:
                last_chain = step
            else:
                sink.on_chains_updated(*step.chains())
        if last_chain is not None:
            sink.on_chains_updated(*last_chain.chains())
        return self._finished_delivered
