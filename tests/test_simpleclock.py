import signal

import pygame
import pytest

import SimpleClock
from ClockFace import ClockTime
from SimpleClock import REDRAW, TITLE, ClockWindow, update_clock


@pytest.fixture()
def window():
  w = ClockWindow(clock=lambda: ClockTime(3, 0, 0))
  yield w
  pygame.quit()


def test_window_opens_at_default_size(window):
  assert window.screen.get_size() == (256, 256)
  assert pygame.display.get_caption()[0] == TITLE
  assert window.running and window.dirty


def test_timer_tick_requests_redraw(window):
  window.draw()
  assert not window.dirty
  assert update_clock(window) is True
  assert window.dirty


def test_timer_event_requests_redraw(window):
  window.draw()
  window.handle(pygame.event.Event(REDRAW))
  assert window.dirty


def test_expose_requests_redraw(window):
  window.draw()
  window.handle(pygame.event.Event(pygame.WINDOWEXPOSED))
  assert window.dirty


def test_draw_paints_the_clock(window):
  window.draw()
  assert window.frames == 1
  assert tuple(window.screen.get_at((128, 128)))[:3] == (0, 0, 0)
  assert tuple(window.screen.get_at((2, 2)))[:3] == (255, 255, 255)


def test_resize_recreates_display(window):
  window.draw()
  window.handle(pygame.event.Event(pygame.VIDEORESIZE, w=400, h=200, size=(400, 200)))
  assert window.screen.get_size() == (400, 200)
  assert window.dirty
  window.draw()
  assert tuple(window.screen.get_at((200, 100)))[:3] == (0, 0, 0)
  assert tuple(window.screen.get_at((50, 100)))[:3] == (255, 255, 255)


def test_close_request_ends_loop_without_further_redraws(window, capsys):
  pygame.event.post(pygame.event.Event(pygame.QUIT))
  window.run()
  assert not window.running
  assert window.frames == 1  # Only the first frame
  assert not pygame.display.get_init()
  assert "Quit" in capsys.readouterr().out


def test_signal_closes_window(window, capsys):
  window.on_signal(signal.SIGTERM, None)
  assert not window.running
  assert "SIGTERM" in capsys.readouterr().out


@pytest.fixture()
def timer_calls(monkeypatch):
  calls = []
  monkeypatch.setattr(pygame.time, "set_timer", lambda event, millis: calls.append((event, millis)))
  return calls


def test_timer_runs_every_half_second_until_close(window, timer_calls):
  assert window.interval == 500
  pygame.event.post(pygame.event.Event(pygame.QUIT))
  window.run()
  assert timer_calls == [(REDRAW, 500), (REDRAW, 0)]


def test_tick_returning_true_keeps_timer(window, timer_calls):
  window.handle(pygame.event.Event(REDRAW))
  assert timer_calls == []


def test_tick_returning_false_stops_timer(timer_calls):
  ticks = []
  w = ClockWindow(clock=lambda: ClockTime(3, 0, 0), tick=lambda win: ticks.append(win) or False)
  try:
    w.handle(pygame.event.Event(REDRAW))
  finally:
    pygame.quit()
  assert ticks == [w]
  assert timer_calls == [(REDRAW, 0)]
  assert w.running


def test_main_opens_fixed_window(monkeypatch):
  started = []
  monkeypatch.setattr(signal, "signal", lambda signum, handler: None)
  monkeypatch.setattr(ClockWindow, "run", lambda self: started.append(self))
  try:
    SimpleClock.main()
    [w] = started
    assert w.screen.get_size() == (256, 256)
    assert w.interval == 500
    assert w.tick is update_clock
  finally:
    pygame.quit()
