from typing import Callable, List
from dataclasses import dataclass, field

# (now_ms, dt_ms)
UpdateFn = Callable[[float, float], None]


@dataclass
class Scene:
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, now: float, dt: float) -> None:
        for fn in self.updaters:
            fn(now, dt)

    # Input hooks, in playfield coordinates (scenes override what they use)
    def on_pointer_down(self, x: float, y: float) -> None:
        pass

    def on_pointer_move(self, x: float, y: float, pressed: bool) -> None:
        pass

    def on_pointer_up(self, x: float, y: float) -> None:
        pass

    def on_key_down(self, key: int) -> None:
        pass

    # Optional per-event handler for anything the engine doesn't translate
    def handle_event(self, event) -> None:
        pass

    # Scenes own their full render pipeline
    def render(self, canvas, text) -> None:  # pragma: no cover - visual
        pass
