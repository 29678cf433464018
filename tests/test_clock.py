import pygame
from tetris_clock import TICK_EVENT, TickClock
from tetris_config import CONFIG
from tetris_game import tick_interval_ms


def test_tick_interval_switches_with_fast_drop(monkeypatch):
    monkeypatch.setitem(CONFIG, "TICK_MS", 1000)
    assert tick_interval_ms(False) == 1000
    assert tick_interval_ms(True) == 50

def test_arm_cancels_then_restarts(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda ev, ms: calls.append((ev, ms)))
    monkeypatch.setitem(CONFIG, "TICK_MS", 1000)
    clock = TickClock()
    clock.start()
    clock.arm(tick_interval_ms(True))
    clock.arm(tick_interval_ms(False))
    assert calls == [
        (TICK_EVENT, 0), (TICK_EVENT, 1000),
        (TICK_EVENT, 0), (TICK_EVENT, 50),
        (TICK_EVENT, 0), (TICK_EVENT, 1000),
    ]
    assert clock.interval_ms == 1000
    clock.cancel()
    assert calls[-1] == (TICK_EVENT, 0)
