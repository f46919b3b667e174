import pygame
from math import pi
from datetime import datetime
from collections import namedtuple
from contextlib import contextmanager
from ClockGeometry import Transform, clock_transform

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
FULLTURN = 2.0 * pi


class ClockTime(namedtuple('ClockTime', 'hour minute second')):
  """Snapshot of the local wall-clock time for one frame"""
  __slots__ = ()

  @classmethod
  def from_datetime(cls, dt):
    return cls(dt.hour, dt.minute, dt.second)

  @classmethod
  def now(cls):
    return cls.from_datetime(datetime.now())


def hour_turn(hour):
  """Fraction of a full turn for the hour hand. Minutes and seconds are deliberately ignored"""
  return (hour % 12) / 12.0

def minute_turn(minute):
  return minute / 60.0

def second_turn(second):
  return second / 60.0


class Pen:
  """Drawing state for a surface: transform, colour and line width, with a save/restore stack"""

  def __init__(self, surface, transform=None):
    self.surface = surface
    self.transform = transform or Transform.identity()
    self.colour = BLACK
    self.linewidth = 1.0
    self._stack = []

  @contextmanager
  def saved(self):
    """Everything changed inside the block is put back on the way out, whatever way that is"""
    self._stack.append((self.transform, self.colour, self.linewidth))
    try:
      yield self
    finally:
      self.transform, self.colour, self.linewidth = self._stack.pop()

  def rotate(self, angle):
    self.transform = self.transform.rotate(angle)

  def fill_rectangle(self, x, y, width, height):
    corners = ((x, y), (x + width, y), (x + width, y + height), (x, y + height))
    pygame.draw.polygon(self.surface, self.colour, [self.transform.apply(*c) for c in corners])

  def stroke_circle(self, x, y, radius):
    unit = self.transform.unit_length()
    thickness = self.linewidth * unit
    # pygame strokes inwards from the radius, so push it out to centre the line on the circle
    pygame.draw.circle(self.surface, self.colour, self.transform.apply(x, y), radius*unit + thickness/2, max(1, round(thickness)))

  def fill_circle(self, x, y, radius):
    pygame.draw.circle(self.surface, self.colour, self.transform.apply(x, y), radius * self.transform.unit_length())


def draw_clock_face(pen):
  with pen.saved():
    pen.colour = BLACK
    pen.linewidth = 0.01
    pen.stroke_circle(0.0, 0.0, 0.95)

def draw_hand(pen, turn, length, thickness):
  """A hand is a rectangle from the origin outwards along the rotated x axis"""
  with pen.saved():
    pen.rotate(turn * FULLTURN)
    pen.colour = BLACK
    pen.fill_rectangle(0.0, -thickness/2, length, thickness)

def draw_hour_hand(pen, hour):
  draw_hand(pen, hour_turn(hour), 0.6, 0.2)

def draw_minute_hand(pen, minute):
  draw_hand(pen, minute_turn(minute), 0.8, 0.1)

def draw_second_hand(pen, second):
  draw_hand(pen, second_turn(second), 0.9, 0.05)

def draw_pin(pen):
  with pen.saved():
    pen.colour = BLACK
    pen.fill_circle(0.0, 0.0, 0.1)

def render(canvas, time):
  """Clears the canvas and paints the clock for the given ClockTime, scaled to fit and centred"""
  width, height = canvas.get_size()
  pen = Pen(canvas)
  with pen.saved():
    canvas.fill(WHITE)
    pen.transform = clock_transform(width, height)
    draw_clock_face(pen)
    draw_hour_hand(pen, time.hour)
    draw_minute_hand(pen, time.minute)
    draw_second_hand(pen, time.second)
    draw_pin(pen)  # Last so it covers where the hands meet
