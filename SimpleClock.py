#!/usr/bin/python3

import os, signal, pygame
from ClockFace import ClockTime, render

TITLE = "Simpleclock"
SIZE = (256, 256)
INTERVAL = 500  # Milliseconds between redraws
REDRAW = pygame.USEREVENT + 1  # Posted by the timer to ask for a new frame

def update_clock(window):
  """Timer tick: ask for a redraw and keep the timer going"""
  window.queue_draw()
  return True


class ClockWindow:
  """The one clock window. Timer ticks, expose events, resizes and close requests all go through here"""

  def __init__(self, clock=ClockTime.now, tick=update_clock):
    try:
      pygame.display.init()
    except pygame.error:
      print(f"{os.getenv('SDL_VIDEODRIVER', 'Default')} video driver failed")
      raise
    print(f"Success with {pygame.display.get_driver()}")
    self.screen = pygame.display.set_mode(SIZE, pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pygame.event.set_blocked(None)  # Ignore all events
    pygame.event.set_allowed((pygame.QUIT, pygame.VIDEORESIZE, pygame.WINDOWEXPOSED, REDRAW))  # ...apart from these
    self.interval = INTERVAL
    self.clock = clock
    self.tick = tick
    self.running = True
    self.dirty = True  # Nothing has been drawn yet
    self.frames = 0

  def queue_draw(self):
    self.dirty = True

  def close(self):
    self.running = False

  def on_signal(self, signum, frame):
    print(f"Signal handler called with signal {signum} - {signal.Signals(signum).name}")
    self.close()

  def draw(self):
    render(self.screen, self.clock())
    pygame.display.flip()
    self.frames += 1
    self.dirty = False

  def handle(self, event):
    if event.type == pygame.QUIT:  # Check for QUIT event
      print("Quit")
      self.close()
    elif event.type == pygame.VIDEORESIZE:  # Check for window resizing
      print(f"Resize: {event.w} x {event.h}")
      self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
      self.queue_draw()
    elif event.type == pygame.WINDOWEXPOSED:
      self.queue_draw()
    elif event.type == REDRAW:
      if not self.tick(self):  # A False return stops the ticks
        pygame.time.set_timer(REDRAW, 0)

  def run(self):
    pygame.time.set_timer(REDRAW, self.interval)
    try:
      while self.running:
        if self.dirty:
          self.draw()
        for event in [pygame.event.wait()] + pygame.event.get():  # Block for one event, then take whatever else is queued
          self.handle(event)
    finally:
      pygame.time.set_timer(REDRAW, 0)
      pygame.quit()


def main():
  window = ClockWindow()
  signal.signal(signal.SIGINT, window.on_signal)
  signal.signal(signal.SIGTERM, window.on_signal)
  window.run()

if __name__ == "__main__":
  main()
